from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from .answers import as_answer
from .types import Answer, Invocation


@dataclass(frozen=True)
class MockConfig:
    """Immutable bundle of mock creation settings.

    - name: label used in the stand-in's repr and in failure messages
    - default_answer: answer for calls no stub matches (empty values if None)
    """

    name: str | None = None
    default_answer: Answer | None = None

    def with_name(self, name: str | None) -> "MockConfig":
        """Return a new config with an updated name."""

        return replace(self, name=name)

    def with_default_answer(
        self, answer: Answer | Callable[[Invocation], Any] | None
    ) -> "MockConfig":
        """Return a new config answering unstubbed calls with ``answer``."""

        return replace(
            self, default_answer=as_answer(answer) if answer is not None else None
        )

    def merge(self, other: "MockConfig") -> "MockConfig":
        """Overlay the settings ``other`` defines on top of this config."""

        return MockConfig(
            name=other.name if other.name is not None else self.name,
            default_answer=other.default_answer
            if other.default_answer is not None
            else self.default_answer,
        )

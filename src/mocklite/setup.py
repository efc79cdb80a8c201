from __future__ import annotations

from typing import Any, Callable

from .config import MockConfig
from .types import Answer, Invocation

_mock_config: MockConfig = MockConfig()


def setup(
    *,
    config: MockConfig | None = None,
    default_answer: Answer | Callable[[Invocation], Any] | None = None,
) -> MockConfig:
    """Set the global configuration every new mock starts from."""
    global _mock_config

    if config is None:
        config = MockConfig().with_default_answer(default_answer)
    elif default_answer is not None:
        raise ValueError(
            "When providing a MockConfig, do not also supply default_answer."
        )

    _mock_config = config
    return _mock_config


def get_config() -> MockConfig:
    """Return the current global mock configuration."""

    return _mock_config


def reset_config() -> MockConfig:
    return setup(config=MockConfig())


def _mutate_config(mutator: Callable[[MockConfig], MockConfig]) -> MockConfig:
    global _mock_config
    _mock_config = mutator(_mock_config)
    return _mock_config


def use_default_answer(
    answer: Answer | Callable[[Invocation], Any] | None,
) -> MockConfig:
    """Replace the default answer used by mocks created from now on."""

    return _mutate_config(lambda cfg: cfg.with_default_answer(answer))

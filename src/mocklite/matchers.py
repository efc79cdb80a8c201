"""Argument matchers and the helpers that report them to the mocking progress.

Helpers are called while building the argument list of a mock call::

    when(registry.lookup(any_string())).then_return("value")

Each helper pushes its matcher onto the pending matcher stack of the
current :class:`~mocklite.progress.MockingProgress` and returns a
placeholder value that stands in for the real argument. When a call uses
helpers, every argument of that call must come from a helper.
"""

from __future__ import annotations

import typing
from dataclasses import dataclass

from .defaults import empty_value_for
from .progress import MockingProgress, get_progress

T = typing.TypeVar("T")


@dataclass(frozen=True)
class Equals:
    """Matches the expected object itself or anything equal to it."""

    expected: typing.Any

    def matches(self, value: typing.Any) -> bool:
        return value is self.expected or value == self.expected

    def __str__(self) -> str:
        return repr(self.expected)


@dataclass(frozen=True)
class Any:
    """Matches every value."""

    def matches(self, value: typing.Any) -> bool:
        return True

    def __str__(self) -> str:
        return "<any>"


@dataclass(frozen=True)
class InstanceOf:
    """Matches instances of ``expected_type`` (None never matches)."""

    expected_type: type

    def matches(self, value: typing.Any) -> bool:
        return isinstance(value, self.expected_type)

    def __str__(self) -> str:
        return f"<any {self.expected_type.__name__}>"


# Helpers


def _report(matcher: typing.Any, progress: MockingProgress | None) -> None:
    (progress or get_progress()).report_matcher(matcher)


def any_value_of(
    type_: type[T], *, progress: MockingProgress | None = None
) -> T:
    """Match any instance of ``type_``; returns the type's empty value."""

    _report(InstanceOf(type_), progress)
    return typing.cast(T, empty_value_for(type_))


def equals_to(value: T, *, progress: MockingProgress | None = None) -> T:
    """Match arguments equal to ``value``; returns ``value`` itself."""

    _report(Equals(value), progress)
    return value


def any_(*, progress: MockingProgress | None = None) -> typing.Any:
    """Match anything, None included."""

    _report(Any(), progress)
    return None


def any_string(*, progress: MockingProgress | None = None) -> str:
    return any_value_of(str, progress=progress)


def any_int(*, progress: MockingProgress | None = None) -> int:
    return any_value_of(int, progress=progress)

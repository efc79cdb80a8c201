from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import VerificationAssertionError
from .invocation import InvocationMatcher
from .types import Invocation


@dataclass(frozen=True)
class VerificationData:
    """What a verification mode checks: the wanted pattern against the log."""

    wanted: InvocationMatcher
    invocations: Sequence[Invocation]

    def count_matching(self) -> int:
        return sum(1 for each in self.invocations if self.wanted.matches(each))


def _check_count(count: int) -> int:
    if count < 0:
        raise ValueError(f"Negative value is not allowed here: {count}")
    return count


@dataclass(frozen=True)
class Times:
    wanted_count: int

    def __post_init__(self) -> None:
        _check_count(self.wanted_count)

    def verify(self, data: VerificationData) -> None:
        actual = data.count_matching()
        if actual != self.wanted_count:
            raise VerificationAssertionError(data.wanted, actual, self.wanted_count)

    def __str__(self) -> str:
        return f"times({self.wanted_count})"


@dataclass(frozen=True)
class AtLeast:
    minimum: int

    def __post_init__(self) -> None:
        _check_count(self.minimum)

    def verify(self, data: VerificationData) -> None:
        actual = data.count_matching()
        if actual < self.minimum:
            raise VerificationAssertionError(
                data.wanted, actual, f"at least {self.minimum}"
            )

    def __str__(self) -> str:
        return f"at_least({self.minimum})"


@dataclass(frozen=True)
class AtMost:
    maximum: int

    def __post_init__(self) -> None:
        _check_count(self.maximum)

    def verify(self, data: VerificationData) -> None:
        actual = data.count_matching()
        if actual > self.maximum:
            raise VerificationAssertionError(
                data.wanted, actual, f"at most {self.maximum}"
            )

    def __str__(self) -> str:
        return f"at_most({self.maximum})"


def times(wanted_number_of_invocations: int) -> Times:
    return Times(wanted_number_of_invocations)


def never() -> Times:
    return Times(0)


def at_least(minimum: int) -> AtLeast:
    return AtLeast(minimum)


def at_most(maximum: int) -> AtMost:
    return AtMost(maximum)

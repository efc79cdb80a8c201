from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .invocation import InvocationMatcher


class MockError(Exception):
    """Base class for errors raised by mocklite itself."""


class MockCreationError(MockError):
    """The requested type cannot be turned into a stand-in."""


class MisuseError(MockError):
    """The stubbing/verification protocol was used incorrectly."""


class MissingMethodInvocationError(MisuseError):
    def __init__(self) -> None:
        super().__init__(
            "when() requires an argument which has to be a method call on a mock, "
            "e.g. when(registry.lookup('key')).then_return('value')"
        )


class UnfinishedStubbingError(MisuseError):
    """An answer was attached while no invocation was waiting to be stubbed."""


class UnfinishedVerificationError(MisuseError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "verify() was called but no method was invoked on the returned mock, "
            "e.g. verify(registry).lookup('key')"
        )


class InvalidUseOfMatchersError(MisuseError):
    """Argument matchers were misplaced or do not cover every argument."""


class NotAMockError(MisuseError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Argument passed is not a mock: {value!r}")
        self.value = value


class VerificationAssertionError(AssertionError):
    """Raised when a verification mode is not satisfied by the invocation log."""

    def __init__(
        self,
        wanted: "InvocationMatcher",
        actual_count: int,
        expected: Any,
    ) -> None:
        self.wanted = wanted
        self.actual_count = actual_count
        self.expected_count = expected
        super().__init__(
            f"{wanted}\nActual: {actual_count}, expected: {expected}"
        )

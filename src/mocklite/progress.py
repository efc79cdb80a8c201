from __future__ import annotations

import contextvars
import logging
from typing import TYPE_CHECKING

from .errors import InvalidUseOfMatchersError, UnfinishedVerificationError

if TYPE_CHECKING:
    from .stubbing import OngoingStubbing
    from .types import Matcher, VerificationMode

_logger = logging.getLogger(__name__)


class MockingProgress:
    """
    Carries call-site intent from one statement to the next intercepted call.

    - Argument matcher helpers push matchers; the next call drains them.
    - ``verify()`` arms a verification mode; the next call drains it.
    - Every non-verifying call leaves an ongoing stubbing; ``when()`` drains it.

    Every slot is one-shot: pulling a value clears it.
    """

    def __init__(self) -> None:
        self._matcher_stack: list[Matcher] = []
        self._verification_mode: VerificationMode | None = None
        self._ongoing_stubbing: OngoingStubbing | None = None

    # Argument matchers
    def report_matcher(self, matcher: "Matcher") -> None:
        self._matcher_stack.append(matcher)

    def pull_localized_matchers(self) -> list["Matcher"]:
        if not self._matcher_stack:
            return []
        matchers = list(self._matcher_stack)
        self._matcher_stack.clear()
        return matchers

    # Stubbing
    def report_ongoing_stubbing(self, stubbing: "OngoingStubbing") -> None:
        self._ongoing_stubbing = stubbing

    def pull_ongoing_stubbing(self) -> "OngoingStubbing | None":
        stubbing = self._ongoing_stubbing
        self._ongoing_stubbing = None
        return stubbing

    # Verification
    def verification_started(self, mode: "VerificationMode") -> None:
        if self._verification_mode is not None:
            self.reset()
            raise UnfinishedVerificationError(
                "verify() was called again before the previous verification "
                "received a method call"
            )
        _logger.debug("Verification started with %s", mode)
        self._ongoing_stubbing = None
        self._verification_mode = mode

    def pull_verification_mode(self) -> "VerificationMode | None":
        mode = self._verification_mode
        self._verification_mode = None
        return mode

    # Lifecycle
    @property
    def has_pending_state(self) -> bool:
        return bool(self._matcher_stack) or self._verification_mode is not None

    def validate_state(self) -> None:
        """Raise if a test left a verification or matchers without a call."""

        if self._verification_mode is not None:
            self.reset()
            raise UnfinishedVerificationError()
        if self._matcher_stack:
            count = len(self._matcher_stack)
            self.reset()
            raise InvalidUseOfMatchersError(
                f"{count} argument matcher(s) were reported outside of a mock call"
            )

    def reset(self) -> None:
        self._matcher_stack.clear()
        self._verification_mode = None
        self._ongoing_stubbing = None


_current_progress: contextvars.ContextVar[MockingProgress | None] = (
    contextvars.ContextVar("mocklite_progress", default=None)
)


def get_progress() -> MockingProgress:
    """Return the progress of the current execution context, creating it if unset."""

    progress = _current_progress.get()
    if progress is None:
        progress = MockingProgress()
        _current_progress.set(progress)
    return progress


def set_progress(progress: MockingProgress | None) -> contextvars.Token:
    """Install ``progress`` for the current context; returns a reset token."""

    return _current_progress.set(progress)


def restore_progress(token: contextvars.Token) -> None:
    _current_progress.reset(token)


def reset_progress() -> MockingProgress:
    """Replace the current context's progress with a fresh instance."""

    progress = MockingProgress()
    _current_progress.set(progress)
    return progress

from __future__ import annotations

import logging
from typing import Any, Callable

from .answers import AwaitableResult, ReturnsEmptyValues
from .container import InvocationContainer
from .invocation import InvocationMatcher, build_invocation
from .progress import MockingProgress, get_progress
from .stubbing import OngoingStubbing
from .types import (
    Answer,
    Invocation,
    InvocationCall,
    Matcher,
    MethodSignature,
    VerificationMode,
)
from .verification import VerificationData

_logger = logging.getLogger(__name__)


class MockHandler:
    """
    Entry point for every call intercepted on one mock.

    A call is either a verification (a mode armed by ``verify()`` is
    pending) or a stubbing-setup / pass-through call. The latter is the same
    path for calls made inside ``when(...)`` and for calls made by code under
    test: the call is logged, offered for stubbing, and answered.

    Without an explicit ``progress`` the handler follows the ambient
    progress of whichever context makes the call. With one, pending state is
    read from that progress first and from the caller's ambient progress
    after it, so the module-level helpers keep working on session mocks.
    """

    def __init__(
        self,
        progress: MockingProgress | None = None,
        *,
        default_answer: Answer | None = None,
    ):
        self._progress = progress
        self.container = InvocationContainer()
        self.default_answer: Answer = default_answer or ReturnsEmptyValues()

    @property
    def progress(self) -> MockingProgress:
        return self._progress or get_progress()

    def _progresses(self) -> tuple[MockingProgress, ...]:
        ambient = get_progress()
        if self._progress is None or self._progress is ambient:
            return (ambient,)
        return (self._progress, ambient)

    def _pull_pending(self) -> tuple[VerificationMode | None, list[Matcher]]:
        mode = None
        matchers: list[Matcher] = []
        for progress in self._progresses():
            pulled = progress.pull_verification_mode()
            if mode is None:
                mode = pulled
            matchers.extend(progress.pull_localized_matchers())
        return mode, matchers

    def __call__(
        self,
        mock: Any,
        method: MethodSignature,
        call: InvocationCall,
        real_method: Callable[..., Any] | None = None,
    ) -> Any:
        # drained before binding so a call with bad arguments still consumes them
        mode, matchers = self._pull_pending()
        invocation = build_invocation(mock, method, call, real_method)
        return self._handle(invocation, mode, matchers)

    def _handle(
        self,
        invocation: Invocation,
        mode: VerificationMode | None,
        matchers: list[Matcher],
    ) -> Any:
        wanted = InvocationMatcher(invocation, matchers)

        if mode is not None:
            _logger.debug("Verifying %s with %s", wanted, mode)
            mode.verify(VerificationData(wanted, self.container.recorded))
            return None

        _logger.debug("Intercepted %s", invocation)
        self.container.record_candidate(wanted)
        stubbing = OngoingStubbing(self.container)
        for progress in self._progresses():
            progress.report_ongoing_stubbing(stubbing)

        answer = self.container.find_answer(invocation)
        if answer is None:
            answer = self.default_answer
        if invocation.method.is_async:
            return AwaitableResult.of(answer, invocation)
        return answer.produce(invocation)

from __future__ import annotations

import logging

from .errors import UnfinishedStubbingError
from .invocation import InvocationMatcher
from .types import Answer, Invocation

_logger = logging.getLogger(__name__)


class StubbedInvocation:
    """A stub table entry: an invocation pattern and its consecutive answers.

    Each matching call consumes the first answer; the last one repeats.
    """

    def __init__(self, matcher: InvocationMatcher, answer: Answer):
        self.matcher = matcher
        self._answers: list[Answer] = [answer]

    def add_answer(self, answer: Answer) -> None:
        self._answers.append(answer)

    @property
    def answers(self) -> tuple[Answer, ...]:
        return tuple(self._answers)

    def matches(self, invocation: Invocation) -> bool:
        return self.matcher.matches(invocation)

    def next_answer(self) -> Answer:
        if len(self._answers) > 1:
            return self._answers.pop(0)
        return self._answers[0]

    def __repr__(self) -> str:
        return f"StubbedInvocation({self.matcher}, answers={self._answers!r})"


class InvocationContainer:
    """Per-mock store of the call log and the stub table."""

    def __init__(self) -> None:
        self._recorded: list[Invocation] = []
        self._stubbed: list[StubbedInvocation] = []
        self._invocation_for_stubbing: InvocationMatcher | None = None

    @property
    def recorded(self) -> tuple[Invocation, ...]:
        return tuple(self._recorded)

    @property
    def stubbed(self) -> tuple[StubbedInvocation, ...]:
        return tuple(self._stubbed)

    def record_candidate(self, matcher: InvocationMatcher) -> None:
        """Log a real call and remember it as the candidate for stubbing."""

        self._recorded.append(matcher.invocation)
        self._invocation_for_stubbing = matcher

    def attach_answer(self, answer: Answer) -> StubbedInvocation:
        """Turn the stubbing candidate into a stub answering with ``answer``."""

        matcher = self._invocation_for_stubbing
        if matcher is None:
            raise UnfinishedStubbingError(
                "No invocation is waiting to be stubbed; call the mock method "
                "inside when(...) before attaching an answer"
            )

        # The call made inside when(...) set the stub up; it is not a real call.
        for index in range(len(self._recorded) - 1, -1, -1):
            if self._recorded[index] is matcher.invocation:
                del self._recorded[index]
                break

        stub = StubbedInvocation(matcher, answer)
        self._stubbed.append(stub)
        self._invocation_for_stubbing = None
        _logger.debug("Stubbed %s with %r", matcher, answer)
        return stub

    def find_answer(self, invocation: Invocation) -> Answer | None:
        """Return the answer of the most recently registered matching stub."""

        for stub in reversed(self._stubbed):
            if stub.matches(invocation):
                return stub.next_answer()
        return None

    def clear_invocations(self) -> None:
        self._recorded.clear()
        self._invocation_for_stubbing = None

    def reset(self) -> None:
        self._recorded.clear()
        self._stubbed.clear()
        self._invocation_for_stubbing = None

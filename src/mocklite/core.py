from __future__ import annotations

from typing import Any, Callable, TypeVar

from .config import MockConfig
from .errors import MissingMethodInvocationError, NotAMockError
from .handler import MockHandler
from .matchers import any_, any_int, any_string, any_value_of, equals_to
from .progress import MockingProgress, get_progress
from .proxy import ProxyFactory, interceptor_of
from .setup import get_config
from .stubbing import OngoingStubbing
from .types import Answer, Invocation, VerificationMode
from .verification import times

T = TypeVar("T")

_proxy_factory = ProxyFactory()


def mock(
    type_to_mock: type[T],
    *,
    name: str | None = None,
    default_answer: Answer | Callable[[Invocation], Any] | None = None,
    config: MockConfig | None = None,
    progress: MockingProgress | None = None,
) -> T:
    """Create a stand-in for ``type_to_mock`` whose calls can be stubbed and verified.

    Settings are resolved from the global config, then ``config``, then the
    keyword arguments. Without ``progress`` the mock follows the ambient
    progress of whichever context calls it.
    """

    resolved = get_config()
    if config is not None:
        resolved = resolved.merge(config)
    if name is not None:
        resolved = resolved.with_name(name)
    if default_answer is not None:
        resolved = resolved.with_default_answer(default_answer)

    handler = MockHandler(
        progress,
        default_answer=resolved.default_answer,
    )
    stand_in = _proxy_factory.create_stand_in(
        type_to_mock, handler, name=resolved.name
    )
    return stand_in


def when(
    method_call: T, *, progress: MockingProgress | None = None
) -> OngoingStubbing[T]:
    """Claim the stubbing left by the mock call evaluated as the argument."""

    stubbing = (progress or get_progress()).pull_ongoing_stubbing()
    if stubbing is None:
        raise MissingMethodInvocationError()
    return stubbing


def verify(
    stand_in: T,
    mode: VerificationMode | None = None,
    *,
    progress: MockingProgress | None = None,
) -> T:
    """Arm ``mode`` (times(1) by default) for the next call on ``stand_in``.

    The mode goes to the progress the mock was created with, or to the
    ambient one for mocks created without it, unless ``progress`` is given.
    """

    handler = handler_of(stand_in)
    (progress or handler.progress).verification_started(
        mode if mode is not None else times(1)
    )
    return stand_in


def handler_of(stand_in: Any) -> MockHandler:
    handler = interceptor_of(stand_in)
    if not isinstance(handler, MockHandler):
        raise NotAMockError(stand_in)
    return handler


def is_mock(value: Any) -> bool:
    return isinstance(interceptor_of(value), MockHandler)


def reset(*stand_ins: Any) -> None:
    """Forget every stub and recorded call of the given mocks."""

    for stand_in in stand_ins:
        handler_of(stand_in).container.reset()


def clear_invocations(*stand_ins: Any) -> None:
    """Forget recorded calls but keep stubs."""

    for stand_in in stand_ins:
        handler_of(stand_in).container.clear_invocations()


class MockSession:
    """
    Mocking API bound to one explicit :class:`MockingProgress`.

    Useful when several test contexts must not share ambient state::

        session = MockSession()
        registry = session.mock(Registry)
        session.when(registry.lookup(session.any_string())).then_return("x")
        session.verify(registry, times(0)).lookup("k")
    """

    def __init__(self, progress: MockingProgress | None = None):
        self.progress = progress or MockingProgress()

    def mock(self, type_to_mock: type[T], **kwargs: Any) -> T:
        return mock(type_to_mock, progress=self.progress, **kwargs)

    def when(self, method_call: T) -> OngoingStubbing[T]:
        return when(method_call, progress=self.progress)

    def verify(self, stand_in: T, mode: VerificationMode | None = None) -> T:
        return verify(stand_in, mode, progress=self.progress)

    def any_value_of(self, type_: type[T]) -> T:
        return any_value_of(type_, progress=self.progress)

    def equals_to(self, value: T) -> T:
        return equals_to(value, progress=self.progress)

    def any_string(self) -> str:
        return any_string(progress=self.progress)

    def any_int(self) -> int:
        return any_int(progress=self.progress)

    def any_(self) -> Any:
        return any_(progress=self.progress)

    def validate(self) -> None:
        self.progress.validate_state()

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from .answers import CallsRealMethod, Raises, Returns, as_answer
from .container import InvocationContainer, StubbedInvocation
from .types import Answer, Invocation

T = TypeVar("T")


class OngoingStubbing(Generic[T]):
    """
    Fluent handle returned by ``when()``.

    The first ``then_*`` call turns the pending invocation into a stub;
    further calls append consecutive answers to that same stub::

        when(registry.lookup("k")).then_return("a").then_raise(KeyError("k"))
    """

    def __init__(self, container: InvocationContainer):
        self._container = container
        self._stub: StubbedInvocation | None = None

    def then_return(self, value: T, *values: T) -> "OngoingStubbing[T]":
        self.then_answer(Returns(value))
        for each in values:
            self.then_answer(Returns(each))
        return self

    def then_raise(
        self,
        error: BaseException | type[BaseException],
        *errors: BaseException | type[BaseException],
    ) -> "OngoingStubbing[T]":
        self.then_answer(Raises(error))
        for each in errors:
            self.then_answer(Raises(each))
        return self

    # Familiar spelling for people coming from Mockito
    then_throw = then_raise

    def then_call_real_method(self) -> "OngoingStubbing[T]":
        return self.then_answer(CallsRealMethod())

    def then_answer(
        self, answer: Answer | Callable[[Invocation], Any]
    ) -> "OngoingStubbing[T]":
        resolved = as_answer(answer)
        if self._stub is None:
            self._stub = self._container.attach_answer(resolved)
        else:
            self._stub.add_answer(resolved)
        return self

from __future__ import annotations

import collections.abc
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Generator

from .defaults import empty_value_for
from .types import Answer, Invocation


@dataclass(frozen=True)
class Returns:
    value: Any

    def produce(self, invocation: Invocation) -> Any:
        return self.value


@dataclass(frozen=True)
class Raises:
    """Raise ``error``; an exception class is instantiated on every call."""

    error: BaseException | type[BaseException]

    def produce(self, invocation: Invocation) -> Any:
        if isinstance(self.error, type):
            raise self.error()
        raise self.error


@dataclass(frozen=True)
class CallableAnswer:
    """Delegate to a user function receiving the invocation."""

    func: Callable[[Invocation], Any]

    def produce(self, invocation: Invocation) -> Any:
        return self.func(invocation)


@dataclass(frozen=True)
class CallsRealMethod:
    def produce(self, invocation: Invocation) -> Any:
        return invocation.call_real_method()


@dataclass(frozen=True)
class ReturnsEmptyValues:
    """Default answer: the empty value of the method's declared return type."""

    def produce(self, invocation: Invocation) -> Any:
        return empty_value_for(invocation.method.return_type)


def as_answer(answer: Answer | Callable[[Invocation], Any]) -> Answer:
    """Accept either an Answer or a plain callable taking the invocation."""

    if callable(getattr(answer, "produce", None)):
        return answer  # type: ignore[return-value]
    if callable(answer):
        return CallableAnswer(answer)
    raise TypeError(f"Expected an Answer or a callable, got {answer!r}")


class AwaitableResult(collections.abc.Coroutine):
    """
    The outcome of an async method call, resolved when the call was made.

    Async calls on a mock are handled eagerly so ``when()`` and ``verify()``
    see them at call time; awaiting this object hands back the value (or
    raises the error) that the answer produced. An awaitable value, such as
    the coroutine of a real async method, is awaited in turn. Unlike a
    native coroutine it may be dropped without ever being awaited.
    """

    def __init__(self, value: Any = None, error: BaseException | None = None):
        self._value = value
        self._error = error
        self._steps: Generator[Any, Any, Any] | None = None

    @classmethod
    def of(cls, answer: Answer, invocation: Invocation) -> "AwaitableResult":
        try:
            return cls(answer.produce(invocation))
        except Exception as exc:
            return cls(error=exc)

    def _resolve(self) -> Generator[Any, Any, Any]:
        if self._error is not None:
            raise self._error
        value = self._value
        if inspect.isawaitable(value):
            value = yield from value.__await__()
        return value

    def _generator(self) -> Generator[Any, Any, Any]:
        if self._steps is None:
            self._steps = self._resolve()
        return self._steps

    def __await__(self) -> Generator[Any, Any, Any]:
        return self._generator()

    def send(self, value: Any) -> Any:
        return self._generator().send(value)

    def throw(self, typ: Any, val: Any = None, tb: Any = None) -> Any:
        error = typ if val is None else val
        if isinstance(error, type):
            error = error()
        if tb is not None:
            error = error.with_traceback(tb)
        return self._generator().throw(error)

    def close(self) -> None:
        if self._steps is not None:
            self._steps.close()

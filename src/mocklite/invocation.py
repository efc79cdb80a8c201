from __future__ import annotations

import inspect
from typing import Any, Sequence

from .errors import InvalidUseOfMatchersError
from .matchers import Equals
from .types import Invocation, InvocationCall, Matcher, MethodSignature


def normalize_arguments(method: MethodSignature, call: InvocationCall) -> tuple[Any, ...]:
    """Return the supplied arguments in declaration order.

    Keyword arguments are bound against the method signature so that
    ``lookup("k")`` and ``lookup(name="k")`` give the same tuple. Omitted
    parameters with defaults are left out, ``*args`` are expanded in place
    and ``**kwargs`` values follow in sorted key order. Raises TypeError,
    like the real method would, when the call does not fit the signature.
    """

    sig = method.signature
    if sig is None:
        return tuple(call.args) + tuple(
            value for _, value in sorted(call.kwargs.items())
        )

    # The receiver slot is filled with a placeholder; it is not an argument.
    bound = sig.bind(None, *call.args, **call.kwargs)
    values: list[Any] = []
    for name, param in list(sig.parameters.items())[1:]:
        if name not in bound.arguments:
            continue
        value = bound.arguments[name]
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            values.extend(value)
        elif param.kind is inspect.Parameter.VAR_KEYWORD:
            values.extend(item for _, item in sorted(value.items()))
        else:
            values.append(value)
    return tuple(values)


def build_invocation(
    mock: Any,
    method: MethodSignature,
    call: InvocationCall,
    real_method: Any = None,
) -> Invocation:
    return Invocation(
        mock=mock,
        method=method,
        arguments=normalize_arguments(method, call),
        call=call,
        real_method=real_method,
    )


def arguments_to_matchers(arguments: Sequence[Any]) -> tuple[Matcher, ...]:
    return tuple(Equals(arg) for arg in arguments)


class InvocationMatcher:
    """An invocation pattern: one recorded call plus a matcher per argument."""

    def __init__(self, invocation: Invocation, matchers: Sequence[Matcher] = ()):
        if matchers and len(matchers) != len(invocation.arguments):
            raise InvalidUseOfMatchersError(
                f"{len(invocation.arguments)} matcher(s) expected for "
                f"{invocation.method}, {len(matchers)} recorded. When using "
                "argument matchers, all arguments have to be provided by matchers."
            )
        self._invocation = invocation
        self._matchers: tuple[Matcher, ...] = (
            tuple(matchers) if matchers else arguments_to_matchers(invocation.arguments)
        )

    @property
    def invocation(self) -> Invocation:
        return self._invocation

    @property
    def matchers(self) -> tuple[Matcher, ...]:
        return self._matchers

    def matches(self, actual: Invocation) -> bool:
        return self._invocation.is_call_equal(actual) and self._has_matching_arguments(
            actual
        )

    def _has_matching_arguments(self, actual: Invocation) -> bool:
        if len(actual.arguments) != len(self._matchers):
            return False
        return all(
            matcher.matches(arg)
            for matcher, arg in zip(self._matchers, actual.arguments)
        )

    def __str__(self) -> str:
        rendered = ", ".join(str(matcher) for matcher in self._matchers)
        return f"{self._invocation.mock!r}.{self._invocation.method.name}({rendered})"

    def __repr__(self) -> str:
        return f"InvocationMatcher({self})"

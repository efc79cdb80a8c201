from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Protocol

from .errors import MisuseError

if TYPE_CHECKING:
    from .verification import VerificationData

# Core invocation types


@dataclass(frozen=True)
class MethodSignature:
    """Identity of an intercepted method.

    - declaring_type: the class in the target's MRO that defines the method
    - name: attribute name of the method
    - parameters: rendered parameters (``self`` excluded)
    - return_type: declared return annotation, not part of equality
    - is_async: the method is a coroutine function
    """

    declaring_type: type
    name: str
    parameters: tuple[str, ...]
    return_type: Any = field(default=None, compare=False)
    signature: inspect.Signature | None = field(
        default=None, compare=False, repr=False
    )
    is_async: bool = field(default=False, compare=False)

    @classmethod
    def from_function(
        cls,
        declaring_type: type,
        name: str,
        func: Callable[..., Any],
        return_type: Any = None,
    ) -> "MethodSignature":
        try:
            sig = inspect.signature(func)
        except (TypeError, ValueError):  # builtins or callables without signature
            sig = None

        params: tuple[str, ...] = ()
        if sig is not None:
            params = tuple(str(param) for param in list(sig.parameters.values())[1:])
        return cls(
            declaring_type=declaring_type,
            name=name,
            parameters=params,
            return_type=return_type,
            signature=sig,
            is_async=inspect.iscoroutinefunction(func),
        )

    @property
    def qualified_name(self) -> str:
        return f"{self.declaring_type.__qualname__}.{self.name}"

    def __str__(self) -> str:
        return f"{self.qualified_name}({', '.join(self.parameters)})"


@dataclass(frozen=True)
class InvocationCall:
    """Positional/keyword arguments exactly as the caller passed them."""

    args: tuple[Any, ...]
    kwargs: dict[str, Any]

    def clone(
        self,
        *,
        args: tuple[Any, ...] | None = None,
        kwargs: dict[str, Any] | None = None,
    ) -> "InvocationCall":
        """Return a copy with updated positional/keyword arguments."""

        new_args = args if args is not None else self.args
        new_kwargs = kwargs.copy() if kwargs is not None else self.kwargs.copy()
        return InvocationCall(args=new_args, kwargs=new_kwargs)


@dataclass(frozen=True, eq=False)
class Invocation:
    """One call that reached a mock.

    - mock: the stand-in the call was made on
    - method: signature of the called method
    - arguments: ordered, normalised actual arguments used for matching
    - call: the raw call, used when forwarding to the real method
    - real_method: bound real implementation, when one exists
    """

    mock: Any
    method: MethodSignature
    arguments: tuple[Any, ...]
    call: InvocationCall = field(
        default_factory=lambda: InvocationCall(args=(), kwargs={}), repr=False
    )
    real_method: Callable[..., Any] | None = field(default=None, repr=False)

    def is_call_equal(self, other: "Invocation") -> bool:
        """Same mock object and same method, arguments ignored."""

        return self.mock is other.mock and self.method == other.method

    def call_real_method(self) -> Any:
        if self.real_method is None:
            raise MisuseError(
                f"Cannot call real method {self.method}: it has no implementation"
            )
        return self.real_method(*self.call.args, **self.call.kwargs)

    def __str__(self) -> str:
        rendered = ", ".join(repr(arg) for arg in self.arguments)
        return f"{self.mock!r}.{self.method.name}({rendered})"


class Matcher(Protocol):
    """Argument predicate; any object exposing ``matches`` qualifies."""

    def matches(self, value: Any) -> bool:  # pragma: no cover - protocol
        ...


class Answer(Protocol):
    """Behaviour bound to a stubbed invocation: return a value or raise."""

    def produce(self, invocation: Invocation) -> Any:  # pragma: no cover
        ...


class VerificationMode(Protocol):
    def verify(self, data: "VerificationData") -> None:  # pragma: no cover
        ...


class Interceptor(Protocol):
    """Callback every method call on a stand-in funnels into."""

    def __call__(
        self,
        mock: Any,
        method: MethodSignature,
        call: InvocationCall,
        real_method: Callable[..., Any] | None,
    ) -> Any:  # pragma: no cover - protocol
        ...

"""Stand-in creation: subclass the target and route its methods to one callback."""

from __future__ import annotations

import inspect
import logging
from functools import partial, wraps
from typing import Any, Callable, Iterator

from .answers import AwaitableResult
from .defaults import resolve_return_type
from .errors import MockCreationError
from .types import Interceptor, InvocationCall, MethodSignature

_logger = logging.getLogger(__name__)

_INTERCEPTOR_ATTR = "__mocklite_interceptor__"
_TARGET_ATTR = "__mocklite_target__"


# Dunders that belong to the stand-in itself rather than to the mocked API
_RESERVED_DUNDERS = frozenset(
    {
        "__init__",
        "__new__",
        "__del__",
        "__init_subclass__",
        "__class_getitem__",
        "__set_name__",
        "__getattr__",
        "__getattribute__",
        "__setattr__",
        "__delattr__",
        "__dir__",
        "__eq__",
        "__ne__",
        "__hash__",
        "__repr__",
        "__str__",
        "__format__",
        "__sizeof__",
        "__reduce__",
        "__reduce_ex__",
        "__getstate__",
        "__setstate__",
        "__copy__",
        "__deepcopy__",
    }
)


def iter_methods(target_type: type) -> Iterator[tuple[str, type, Callable[..., Any]]]:
    """Yield (name, declaring_type, function) for every interceptable method.

    Walks the MRO so the most derived definition wins. Operator dunders such
    as ``__getitem__`` or ``__call__`` are included; construction, attribute
    access, identity and repr dunders are not. Static/class methods and
    properties are left alone.
    """

    seen: set[str] = set()
    for owner in target_type.__mro__:
        if owner is object:
            continue
        for name, value in vars(owner).items():
            if name in _RESERVED_DUNDERS or name in seen:
                continue
            seen.add(name)
            if inspect.isfunction(value):
                yield name, owner, value


def _make_interceptor(
    owner: type,
    name: str,
    func: Callable[..., Any],
    on_call: Interceptor,
) -> Callable[..., Any]:
    method = MethodSignature.from_function(
        owner, name, func, return_type=resolve_return_type(func)
    )
    abstract = getattr(func, "__isabstractmethod__", False)

    def real_method_for(instance: Any) -> Callable[..., Any] | None:
        return None if abstract else partial(func, instance)

    if inspect.iscoroutinefunction(func):

        @wraps(func)
        def intercept_async(self: Any, *args: Any, **kwargs: Any) -> Any:
            call = InvocationCall(args=args, kwargs=kwargs)
            result = on_call(self, method, call, real_method_for(self))
            if inspect.isawaitable(result):
                return result
            return AwaitableResult(result)

        inspect.markcoroutinefunction(intercept_async)
        intercept: Callable[..., Any] = intercept_async
    else:

        @wraps(func)
        def intercept(self: Any, *args: Any, **kwargs: Any) -> Any:
            call = InvocationCall(args=args, kwargs=kwargs)
            return on_call(self, method, call, real_method_for(self))

    # wraps() copies __isabstractmethod__ from the original function
    intercept.__dict__.pop("__isabstractmethod__", None)
    return intercept


def _stand_in_repr(self: Any) -> str:
    name = getattr(type(self), "__mocklite_name__", None)
    target = getattr(type(self), _TARGET_ATTR)
    return f"<mock {name or target.__name__}>"


class ProxyFactory:
    """
    Build interceptable stand-ins for classes.

    The stand-in is an instance of a fresh subclass of the target whose
    methods all funnel into ``on_call``. It is created with
    ``object.__new__`` so the target's ``__init__`` never runs.
    """

    def create_stand_in(
        self,
        target_type: Any,
        on_call: Interceptor,
        *,
        name: str | None = None,
    ) -> Any:
        self._check_mockable(target_type)

        namespace: dict[str, Any] = {
            "__module__": target_type.__module__,
            "__qualname__": f"{target_type.__qualname__}$Mock",
            "__eq__": object.__eq__,
            "__ne__": object.__ne__,
            "__hash__": object.__hash__,
            "__repr__": _stand_in_repr,
            "__str__": _stand_in_repr,
            "__mocklite_name__": name,
            _TARGET_ATTR: target_type,
            _INTERCEPTOR_ATTR: on_call,
        }
        for attr, owner, func in iter_methods(target_type):
            namespace[attr] = _make_interceptor(owner, attr, func, on_call)

        metaclass = type(target_type)
        try:
            proxy_class = metaclass(
                f"{target_type.__name__}$Mock", (target_type,), namespace
            )
        except TypeError as exc:
            raise MockCreationError(f"Cannot mock this class: {target_type!r}") from exc
        proxy_class.__abstractmethods__ = frozenset()

        try:
            instance = object.__new__(proxy_class)
        except TypeError as exc:
            raise MockCreationError(
                f"Cannot instantiate a stand-in for {target_type!r}"
            ) from exc

        _logger.debug("Created stand-in for %s", target_type.__qualname__)
        return instance

    @staticmethod
    def _check_mockable(target_type: Any) -> None:
        if not isinstance(target_type, type):
            raise MockCreationError(f"Cannot mock {target_type!r}: not a class")
        if getattr(target_type, "__final__", False):
            raise MockCreationError(
                f"Cannot mock {target_type.__qualname__}: class is marked final"
            )


def interceptor_of(value: Any) -> Interceptor | None:
    """Return the callback a stand-in routes to, or None for other objects."""

    return getattr(type(value), _INTERCEPTOR_ATTR, None)


def target_of(value: Any) -> type | None:
    return getattr(type(value), _TARGET_ATTR, None)

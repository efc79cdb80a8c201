"""Type-appropriate "empty" values returned for unstubbed calls."""

from __future__ import annotations

import collections.abc as cabc
import inspect
import types
import typing
from typing import Any, Union, get_args, get_origin

_EMPTY_FACTORIES: dict[Any, typing.Callable[[], Any]] = {
    bool: bool,
    int: int,
    float: float,
    complex: complex,
    str: str,
    bytes: bytes,
    bytearray: bytearray,
    list: list,
    dict: dict,
    set: set,
    frozenset: frozenset,
    tuple: tuple,
    cabc.Sequence: list,
    cabc.MutableSequence: list,
    cabc.Mapping: dict,
    cabc.MutableMapping: dict,
    cabc.Set: frozenset,
    cabc.MutableSet: set,
    cabc.Collection: list,
    cabc.Iterable: list,
    cabc.Iterator: lambda: iter(()),
    cabc.Generator: lambda: (item for item in ()),
}


def empty_value_for(annotation: Any) -> Any:
    """Return the zero value of ``annotation`` or None when there is none.

    Numbers give 0, text gives an empty string, containers give a fresh empty
    container; Optional[...] and unknown types give None. Generic aliases
    such as ``list[str]`` resolve through their origin.
    """

    if annotation in (None, type(None), inspect.Signature.empty, Any):
        return None

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return None
    if origin is typing.Annotated:
        return empty_value_for(get_args(annotation)[0])
    if origin is not None:
        annotation = origin

    if not isinstance(annotation, cabc.Hashable):
        return None
    factory = _EMPTY_FACTORIES.get(annotation)
    if factory is not None:
        return factory()
    return None


def resolve_return_type(func: Any) -> Any:
    """Return the evaluated return annotation of ``func``, raw when unresolvable."""

    try:
        hints = typing.get_type_hints(func)
    except (NameError, TypeError, AttributeError):  # unresolved forward refs
        return getattr(func, "__annotations__", {}).get("return")
    return hints.get("return")

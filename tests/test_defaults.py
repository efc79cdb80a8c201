import collections.abc as cabc
from typing import Annotated, Any, Optional, Union

import pytest

from mocklite.defaults import empty_value_for, resolve_return_type


@pytest.mark.parametrize(
    "annotation, expected",
    [
        (int, 0),
        (float, 0.0),
        (bool, False),
        (str, ""),
        (bytes, b""),
        (list, []),
        (list[str], []),
        (dict[str, int], {}),
        (set, set()),
        (tuple[int, ...], ()),
        (cabc.Sequence[int], []),
        (cabc.Mapping[str, int], {}),
        (Annotated[int, "meta"], 0),
        (Optional[int], None),
        (Union[int, str], None),
        (int | None, None),
        (object, None),
        (Any, None),
        (None, None),
        ("int", None),
    ],
)
def test_empty_value_for(annotation, expected):
    value = empty_value_for(annotation)
    assert value == expected
    assert type(value) is type(expected)


def test_empty_containers_are_fresh():
    first = empty_value_for(list)
    first.append(1)
    assert empty_value_for(list) == []


def test_empty_iterator():
    assert list(empty_value_for(cabc.Iterator[int])) == []


def test_resolve_return_type():
    def typed() -> int: ...

    def untyped(): ...

    def forward() -> "Missing": ...  # noqa: F821

    assert resolve_return_type(typed) is int
    assert resolve_return_type(untyped) is None
    assert resolve_return_type(forward) == "Missing"

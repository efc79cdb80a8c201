import asyncio
import inspect

import pytest
from sample_types import (
    Calculator,
    Catalog,
    Greeter,
    Registry,
    Repository,
    ScientificCalculator,
    Sealed,
)

from mocklite.errors import MockCreationError
from mocklite.proxy import ProxyFactory, interceptor_of, iter_methods, target_of


class Recorder:
    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, mock, method, call, real_method):
        self.calls.append((mock, method, call, real_method))
        return self.result


def test_stand_in_is_instance_without_running_init():
    recorder = Recorder(result=7)
    stand_in = ProxyFactory().create_stand_in(Calculator, recorder)

    assert isinstance(stand_in, Calculator)
    assert stand_in.add(1, b=2) == 7

    mock, method, call, real_method = recorder.calls[0]
    assert mock is stand_in
    assert method.name == "add"
    assert method.declaring_type is Calculator
    assert method.return_type is int
    assert call.args == (1,)
    assert call.kwargs == {"b": 2}
    assert real_method(*call.args, **call.kwargs) == 3


def test_inherited_methods_keep_their_declaring_type():
    recorder = Recorder()
    stand_in = ProxyFactory().create_stand_in(ScientificCalculator, recorder)
    stand_in.add(1, 2)
    stand_in.sqrt(4.0)
    assert [c[1].declaring_type for c in recorder.calls] == [
        Calculator,
        ScientificCalculator,
    ]


def test_static_methods_and_properties_are_not_intercepted():
    recorder = Recorder()
    stand_in = ProxyFactory().create_stand_in(Calculator, recorder)
    assert stand_in.version() == "1.0"
    assert stand_in.size == 3
    assert recorder.calls == []
    names = [name for name, _, _ in iter_methods(Calculator)]
    assert "version" not in names
    assert "size" not in names
    assert "add" in names


def test_abstract_classes_and_protocols_can_be_mocked():
    recorder = Recorder(result=True)
    repository = ProxyFactory().create_stand_in(Repository, recorder)
    assert repository.save("x") is True
    assert recorder.calls[0][3] is None

    greeter = ProxyFactory().create_stand_in(Greeter, Recorder(result="hi"))
    assert greeter.greet("bob") == "hi"


def test_async_methods_stay_awaitable():
    recorder = Recorder(result=b"mocked")
    stand_in = ProxyFactory().create_stand_in(Calculator, recorder)
    assert inspect.iscoroutinefunction(type(stand_in).fetch)

    pending = stand_in.fetch("k")
    # delivered when called, not when awaited
    assert len(recorder.calls) == 1
    assert asyncio.run(pending) == b"mocked"


def test_async_real_method_is_awaited():
    recorder = Recorder()
    stand_in = ProxyFactory().create_stand_in(Calculator, recorder)
    stand_in.fetch("k")
    real_method = recorder.calls[0][3]
    recorder.result = real_method("k")
    assert asyncio.run(stand_in.fetch("k")) == b"k"


def test_operator_dunders_are_intercepted():
    recorder = Recorder(result=4)
    stand_in = ProxyFactory().create_stand_in(Catalog, recorder)

    assert stand_in["a"] == 4
    assert len(stand_in) == 4
    assert stand_in("a") == 4
    assert [c[1].name for c in recorder.calls] == ["__getitem__", "__len__", "__call__"]
    assert str(stand_in) == "<mock Catalog>"
    names = [name for name, _, _ in iter_methods(Catalog)]
    assert "__init__" not in names
    assert "__str__" not in names


def test_identity_semantics_and_repr():
    factory = ProxyFactory()
    first = factory.create_stand_in(Registry, Recorder())
    second = factory.create_stand_in(Registry, Recorder(), name="registry")
    assert first == first
    assert first != second
    assert len({first, second}) == 2
    assert repr(first) == "<mock Registry>"
    assert repr(second) == "<mock registry>"


def test_lookup_helpers():
    recorder = Recorder()
    stand_in = ProxyFactory().create_stand_in(Registry, recorder)
    assert interceptor_of(stand_in) is recorder
    assert target_of(stand_in) is Registry
    assert interceptor_of(Registry()) is None
    assert target_of(object()) is None


@pytest.mark.parametrize("target", [Sealed, bool, 42, "Registry", len])
def test_unmockable_targets(target):
    with pytest.raises(MockCreationError):
        ProxyFactory().create_stand_in(target, Recorder())

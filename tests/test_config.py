import pytest
from sample_types import Registry

from mocklite import mock
from mocklite.answers import CallableAnswer, Returns
from mocklite.config import MockConfig
from mocklite.setup import get_config, reset_config, setup, use_default_answer


def test_config_builders_return_new_instances():
    base = MockConfig()
    named = base.with_name("registry")
    assert base.name is None
    assert named.name == "registry"

    answered = named.with_default_answer(Returns(1))
    assert answered.default_answer == Returns(1)
    assert named.default_answer is None

    wrapped = base.with_default_answer(lambda inv: 2)
    assert isinstance(wrapped.default_answer, CallableAnswer)
    assert base.with_default_answer(None).default_answer is None


def test_config_merge_prefers_other_when_set():
    left = MockConfig(name="left", default_answer=Returns("left"))
    right = MockConfig(name="right")
    merged = left.merge(right)
    assert merged.name == "right"
    assert merged.default_answer == Returns("left")
    assert MockConfig().merge(left) == left


def test_setup_sets_global_defaults():
    config = setup(default_answer=Returns("global"))
    assert get_config() is config
    registry = mock(Registry)
    assert registry.lookup("k") == "global"

    # per-mock settings override the global config
    assert mock(Registry, default_answer=Returns("local")).lookup("k") == "local"
    assert mock(Registry, config=MockConfig(default_answer=Returns("cfg"))).lookup("k") == "cfg"


def test_setup_rejects_mixed_arguments():
    with pytest.raises(ValueError):
        setup(config=MockConfig(), default_answer=Returns(1))


def test_use_default_answer_and_reset():
    use_default_answer(Returns("changed"))
    assert get_config().default_answer == Returns("changed")
    reset_config()
    assert get_config() == MockConfig()
    assert mock(Registry).lookup("k") is None


def test_named_mock_repr():
    assert repr(mock(Registry, name="primary")) == "<mock primary>"
    setup(config=MockConfig(name="shared"))
    assert repr(mock(Registry)) == "<mock shared>"

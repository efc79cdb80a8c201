import pytest
from sample_types import Registry

from mocklite.answers import Returns
from mocklite.container import InvocationContainer
from mocklite.errors import UnfinishedStubbingError
from mocklite.invocation import InvocationMatcher, build_invocation
from mocklite.matchers import InstanceOf
from mocklite.types import InvocationCall, MethodSignature

MOCK = object()
LOOKUP = MethodSignature.from_function(Registry, "lookup", Registry.lookup)


def lookup(name):
    return build_invocation(MOCK, LOOKUP, InvocationCall(args=(name,), kwargs={}))


def test_record_candidate_logs_invocation():
    container = InvocationContainer()
    first, second = lookup("a"), lookup("b")
    container.record_candidate(InvocationMatcher(first))
    container.record_candidate(InvocationMatcher(second))
    assert container.recorded == (first, second)


def test_attach_answer_removes_stubbing_call_from_log():
    container = InvocationContainer()
    real = lookup("a")
    container.record_candidate(InvocationMatcher(real))
    container.record_candidate(InvocationMatcher(lookup("b")))

    stub = container.attach_answer(Returns("B"))

    assert container.recorded == (real,)
    assert container.stubbed == (stub,)
    assert stub.answers == (Returns("B"),)


def test_attach_answer_without_candidate_fails():
    container = InvocationContainer()
    with pytest.raises(UnfinishedStubbingError):
        container.attach_answer(Returns(1))

    container.record_candidate(InvocationMatcher(lookup("a")))
    container.attach_answer(Returns(1))
    with pytest.raises(UnfinishedStubbingError):
        container.attach_answer(Returns(2))


def test_find_answer_matches_stubbed_invocation():
    container = InvocationContainer()
    container.record_candidate(InvocationMatcher(lookup("a")))
    container.attach_answer(Returns("A"))

    assert container.find_answer(lookup("a")) == Returns("A")
    assert container.find_answer(lookup("b")) is None


def test_find_answer_prefers_latest_registration():
    container = InvocationContainer()
    container.record_candidate(InvocationMatcher(lookup(""), [InstanceOf(str)]))
    container.attach_answer(Returns("any"))
    container.record_candidate(InvocationMatcher(lookup("a")))
    container.attach_answer(Returns("exact"))

    assert container.find_answer(lookup("a")) == Returns("exact")
    assert container.find_answer(lookup("b")) == Returns("any")

    # A later broad stub overrides the earlier narrow one
    container.record_candidate(InvocationMatcher(lookup(""), [InstanceOf(str)]))
    container.attach_answer(Returns("broad"))
    assert container.find_answer(lookup("a")) == Returns("broad")


def test_consecutive_answers_repeat_the_last():
    container = InvocationContainer()
    container.record_candidate(InvocationMatcher(lookup("a")))
    stub = container.attach_answer(Returns(1))
    stub.add_answer(Returns(2))

    answers = [container.find_answer(lookup("a")) for _ in range(3)]
    assert answers == [Returns(1), Returns(2), Returns(2)]


def test_reset_and_clear_invocations():
    container = InvocationContainer()
    container.record_candidate(InvocationMatcher(lookup("a")))
    container.attach_answer(Returns("A"))
    container.record_candidate(InvocationMatcher(lookup("a")))

    container.clear_invocations()
    assert container.recorded == ()
    assert container.find_answer(lookup("a")) == Returns("A")

    container.reset()
    assert container.stubbed == ()
    assert container.find_answer(lookup("a")) is None

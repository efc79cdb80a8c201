"""Interaction-based mocks: stub calls on stand-ins, then verify how often they happened."""

from .answers import CallableAnswer, CallsRealMethod, Raises, Returns, ReturnsEmptyValues
from .config import MockConfig
from .core import (
    MockSession,
    clear_invocations,
    handler_of,
    is_mock,
    mock,
    reset,
    verify,
    when,
)
from .errors import (
    InvalidUseOfMatchersError,
    MisuseError,
    MissingMethodInvocationError,
    MockCreationError,
    MockError,
    NotAMockError,
    UnfinishedStubbingError,
    UnfinishedVerificationError,
    VerificationAssertionError,
)
from .matchers import any_, any_int, any_string, any_value_of, equals_to
from .progress import MockingProgress, get_progress, reset_progress
from .setup import get_config, reset_config, setup, use_default_answer
from .stubbing import OngoingStubbing
from .types import Invocation, InvocationCall, MethodSignature
from .verification import at_least, at_most, never, times

__all__ = [
    "mock",
    "when",
    "verify",
    "times",
    "never",
    "at_least",
    "at_most",
    "any_value_of",
    "equals_to",
    "any_string",
    "any_int",
    "any_",
    "reset",
    "clear_invocations",
    "is_mock",
    "handler_of",
    "MockSession",
    "MockConfig",
    "setup",
    "get_config",
    "reset_config",
    "use_default_answer",
    "MockingProgress",
    "get_progress",
    "reset_progress",
    "OngoingStubbing",
    "Invocation",
    "InvocationCall",
    "MethodSignature",
    "Returns",
    "Raises",
    "CallableAnswer",
    "CallsRealMethod",
    "ReturnsEmptyValues",
    "MockError",
    "MockCreationError",
    "MisuseError",
    "MissingMethodInvocationError",
    "UnfinishedStubbingError",
    "UnfinishedVerificationError",
    "InvalidUseOfMatchersError",
    "NotAMockError",
    "VerificationAssertionError",
]

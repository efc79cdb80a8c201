"""pytest integration: isolate mocking state per test.

Installed as a pytest plugin, this module provides the ``mocklite_progress``
fixture. Request it (or make it autouse in a conftest) to give each test a
fresh :class:`~mocklite.progress.MockingProgress` that is validated when the
test finishes, so an unfinished ``verify()`` or a stray matcher fails the
test that caused it instead of leaking into the next one.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import pytest

from .progress import MockingProgress, restore_progress, set_progress

__all__ = ["fresh_progress", "mocklite_progress"]


@contextmanager
def fresh_progress(*, validate: bool = True) -> Iterator[MockingProgress]:
    """Install a new progress for the block and restore the previous one after."""

    progress = MockingProgress()
    token = set_progress(progress)
    try:
        yield progress
        if validate:
            progress.validate_state()
    finally:
        restore_progress(token)


@pytest.fixture
def mocklite_progress() -> Iterator[MockingProgress]:
    with fresh_progress() as progress:
        yield progress

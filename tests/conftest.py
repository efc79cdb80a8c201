import pytest

from mocklite.setup import reset_config
from mocklite.testing import fresh_progress, mocklite_progress  # noqa: F401


@pytest.fixture(autouse=True)
def progress():
    """Give every test its own mocking progress and the default config."""

    reset_config()
    with fresh_progress() as current:
        yield current
    reset_config()

"""Pytest configuration and shared fixtures for vessel tests."""

import pytest

from vessel import _config
from vessel._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default diagnostics config."""
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()


@pytest.fixture
def sample_present():
    """Sample Present value for testing."""
    from vessel import Present

    return Present("hello")


@pytest.fixture
def sample_absent():
    """Sample Absent value for testing."""
    from vessel import Absent

    return Absent


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from vessel import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from vessel import Failure

    return Failure("Oh no")

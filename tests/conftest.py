"""Pytest configuration and shared fixtures for option-result tests."""

import pytest

from option_result import _config
from option_result._logging import clear_log_hooks


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from option_result import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from option_result import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from option_result import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from option_result import Nothing

    return Nothing


@pytest.fixture
def call_counter():
    """A zero-argument thunk that records how many times it was called."""

    class Counter:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self) -> str:
            self.calls += 1
            return 'fallback'

    return Counter()


@pytest.fixture
def reset_config():
    """Forget any configuration and log hooks set by a test."""
    yield
    _config._config = None
    clear_log_hooks()

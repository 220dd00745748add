"""Pytest configuration and shared fixtures for polaris tests."""

import logging

import pytest
import structlog
from hypothesis import HealthCheck, settings

from polaris import reset_config
from polaris._logging import clear_log_hooks

# The autouse isolation fixture only resets process-global state, which
# property tests never touch between examples.
settings.register_profile('polaris', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('polaris')


@pytest.fixture(autouse=True)
def isolate_global_state(monkeypatch):
    """Reset config, log hooks and logging setup around every test."""
    for name in ('POLARIS_ERROR_SEPARATOR', 'POLARIS_ASYNC_LIMIT', 'POLARIS_LOG_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from polaris import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from polaris import Failure

    return Failure('test error')


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from polaris import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from polaris import Nothing

    return Nothing

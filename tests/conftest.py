"""Pytest configuration and shared fixtures for fallible tests."""

import logging

import pytest

from fallible import _config
from fallible._logging import LOGGER_NAME, clear_log_hooks


def _reset_library_logger() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture(autouse=True)
def reset_config():
    """Each test starts without an init() configuration or log hooks."""
    _config.reset()
    clear_log_hooks()
    _reset_library_logger()
    yield
    _config.reset()
    clear_log_hooks()
    _reset_library_logger()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fallible import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fallible import Err

    return Err(ValueError("test error"))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fallible import Some

    return Some("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fallible import Nothing

    return Nothing

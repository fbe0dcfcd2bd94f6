"""Pytest configuration and shared fixtures for klaw-variant tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from klaw_variant import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from klaw_variant import Err

    return Err("Let's test some errors")


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_variant import Some

    return Some(24)


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_variant import Nothing

    return Nothing


@pytest.fixture(autouse=True)
def reset_variant_state():
    """Reset global configuration and log hooks around each test."""
    import klaw_variant._config as config_module
    from klaw_variant._logging import clear_log_hooks

    config_module._config = None
    clear_log_hooks()
    yield
    config_module._config = None
    clear_log_hooks()

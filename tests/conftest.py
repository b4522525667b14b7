"""Pytest configuration and shared fixtures for tryresult tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from tryresult import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from tryresult import Err

    return Err(ValueError("test error"))

"""Pytest configuration shared by all tests."""

import inspect
from unittest.mock import MagicMock

import pytest

from tests.utils.identity_provider import StubIdentityProvider


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double recording calls; bind() returns the same mock."""
    logger = MagicMock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def identity_provider() -> StubIdentityProvider:
    """In-memory identity provider with one registered account."""
    provider = StubIdentityProvider()
    provider.register(email="existing@example.com", password="CorrectHorse1!")
    return provider


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests against HTTP mocks"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        function = getattr(item, "function", None)
        if function is not None and inspect.iscoroutinefunction(function):
            item.add_marker(pytest.mark.asyncio)

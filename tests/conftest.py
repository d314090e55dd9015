"""Pytest configuration and shared fixtures for http-auth-core tests."""

import pytest

from http_auth_core.auth import BasicAuthResolver
from http_auth_core.testing import RecordingConfigProvider


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing environment-backed configuration.
    """
    import os

    # Store keys that look like test-related env vars
    test_prefixes = ("TEST_", "HTTP_AUTH_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def resolver():
    """A Basic resolver with its own empty cache."""
    return BasicAuthResolver()


@pytest.fixture
def aladdin_config():
    """Config with the RFC 2617 example credentials for realm ``WallyWorld``."""
    return RecordingConfigProvider.for_realm("WallyWorld", "Aladdin", "open sesame")

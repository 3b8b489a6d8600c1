"""Pytest configuration and shared fixtures for netsuite-sdk tests."""

import os

import pytest

from netsuite_sdk.testing import make_config, make_credentials


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear NetSuite environment variables before each test.

    This prevents a developer's real credentials from leaking into tests.
    """
    for key in list(os.environ.keys()):
        if key.startswith(("NETSUITE_", "TEST_NETSUITE_")):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def credentials():
    return make_credentials()


@pytest.fixture
def config():
    """Config with retries disabled and zero backoff."""
    return make_config()


@pytest.fixture
def sleeps(monkeypatch):
    """Record backoff sleeps instead of waiting."""
    recorded: list[float] = []

    async def fake_sleep(delay):
        recorded.append(delay)

    monkeypatch.setattr("netsuite_sdk.transport.retry.asyncio.sleep", fake_sleep)
    return recorded

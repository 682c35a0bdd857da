"""Pytest configuration and shared fixtures for amadeus-client-core tests."""

import asyncio
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents test pollution when testing credential resolution.
    """
    import os

    test_prefixes = ("TEST_", "AMADEUS_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def sleep_calls():
    """Replace asyncio.sleep with a non-waiting stub and collect requested delays."""
    delays: list[float] = []
    original_sleep = asyncio.sleep

    async def capturing_sleep(delay, *args, **kwargs):
        delays.append(delay)
        await original_sleep(0)

    with patch("asyncio.sleep", side_effect=capturing_sleep):
        yield delays

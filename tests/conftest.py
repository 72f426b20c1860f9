"""
Pytest configuration and shared fixtures for Zerotrust SDK tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from zerotrust.logging_config import clear_correlation_id
from zerotrust.sdk.adapters.mock import MockAdapter
from zerotrust.sdk.client import ZeroTrustClient
from zerotrust.sdk.hooks import HookRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_adapter() -> MockAdapter:
    """Empty in-memory adapter; tests register responses with ``add``."""
    return MockAdapter()


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def client(mock_adapter: MockAdapter) -> ZeroTrustClient:
    """Client wired to the shared mock adapter."""
    return ZeroTrustClient(adapter=mock_adapter)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove credential variables so config defaults are predictable."""
    for name in ("CLOUDFLARE_API_TOKEN", "CLOUDFLARE_API_KEY", "CLOUDFLARE_EMAIL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> Generator[None, None, None]:
    yield
    clear_correlation_id()

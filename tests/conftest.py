"""Shared test configuration and fixtures."""

from collections.abc import Iterator

import pytest

from cyclecrypt.kdf import DerivedKeyCache
from cyclecrypt.settings import get_settings

TEST_SECRET = "test-secret-123"


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:  # type: ignore[no-untyped-def]
    """Keep a developer's .env and the settings singleton out of each test."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENCRYPTION_SECRET", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def configured_secret(monkeypatch: pytest.MonkeyPatch) -> str:
    """Set ENCRYPTION_SECRET in the environment."""
    monkeypatch.setenv("ENCRYPTION_SECRET", TEST_SECRET)
    return TEST_SECRET


@pytest.fixture
def key_cache() -> DerivedKeyCache:
    """A private key cache, so tests can observe derivations."""
    return DerivedKeyCache()

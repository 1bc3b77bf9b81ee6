"""Tests for EncryptionSettings."""

import pytest
from pydantic import ValidationError

from cyclecrypt.settings import EncryptionSettings, get_settings


def test_defaults() -> None:
    """Secret is empty and logging is INFO when nothing is configured."""
    settings = EncryptionSettings()
    assert settings.encryption_secret == ""
    assert settings.LOG_LEVEL == "INFO"


def test_env_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENCRYPTION_SECRET", "env-secret")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = EncryptionSettings()
    assert settings.encryption_secret == "env-secret"
    assert settings.LOG_LEVEL == "DEBUG"


def test_dotenv_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:  # type: ignore[no-untyped-def]
    """A .env file in the working directory is read."""
    (tmp_path / ".env").write_text("ENCRYPTION_SECRET=from-dotenv\nUNRELATED=1\n")
    monkeypatch.chdir(tmp_path)
    assert EncryptionSettings().encryption_secret == "from-dotenv"


def test_secret_not_in_repr(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENCRYPTION_SECRET", "do-not-print-me")
    settings = EncryptionSettings()
    assert "do-not-print-me" not in repr(settings)
    assert "do-not-print-me" not in str(settings.model_dump())


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_log_level_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert EncryptionSettings().LOG_LEVEL == "WARNING"


@pytest.mark.parametrize("level", ["verbose", "TRACE", ""])
def test_unknown_log_level_rejected(monkeypatch: pytest.MonkeyPatch, level: str) -> None:
    monkeypatch.setenv("LOG_LEVEL", level)
    with pytest.raises(ValidationError):
        EncryptionSettings()

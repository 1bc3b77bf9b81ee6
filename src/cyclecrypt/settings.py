"""Encryption settings loaded from environment variables."""

import functools
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings

from cyclecrypt.constants import DEFAULT_LOG_LEVEL

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EncryptionSettings(BaseSettings):
    """Process-wide encryption configuration.

    The secret is held as a ``SecretStr`` so it never shows up in reprs or
    validation errors.
    """

    ENCRYPTION_SECRET: SecretStr = SecretStr("")

    # Logging (command-line tool)
    LOG_LEVEL: LogLevel = DEFAULT_LOG_LEVEL

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def encryption_secret(self) -> str:
        """Plain value of ``ENCRYPTION_SECRET`` (empty string when unset)."""
        return self.ENCRYPTION_SECRET.get_secret_value()


@functools.lru_cache(maxsize=1)
def get_settings() -> EncryptionSettings:
    """Return cached encryption settings singleton."""
    return EncryptionSettings()

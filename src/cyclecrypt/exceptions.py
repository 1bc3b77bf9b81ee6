"""Domain exceptions for encryption and decryption."""

from cyclecrypt.constants import SECRET_ENV_VAR


class EncryptionError(Exception):
    """Base exception for cyclecrypt errors."""


class ConfigurationError(EncryptionError):
    """The encryption secret is missing or empty."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        msg = f"{SECRET_ENV_VAR} environment variable not configured"
        super().__init__(f"{msg}: {detail}")


class FormatError(EncryptionError):
    """A token (or decrypted payload) does not have the expected shape."""


class IntegrityError(EncryptionError):
    """Authentication tag verification failed.

    Raised for tampered or corrupted tokens and for tokens produced under a
    different secret. No plaintext is ever returned alongside this error.
    """

    def __init__(self) -> None:
        super().__init__("Token failed integrity verification")

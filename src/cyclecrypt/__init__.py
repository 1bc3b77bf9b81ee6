"""Authenticated string encryption (AES-256-GCM, scrypt-derived key)."""

from cyclecrypt.cipher import StringEncryptor, decrypt, decrypt_optional, encrypt, encrypt_optional
from cyclecrypt.exceptions import ConfigurationError, EncryptionError, FormatError, IntegrityError
from cyclecrypt.kdf import DerivedKeyCache, default_key_cache, derive_key
from cyclecrypt.settings import EncryptionSettings, get_settings
from cyclecrypt.token import SealedToken, is_token

__all__ = [
    "ConfigurationError",
    "DerivedKeyCache",
    "EncryptionError",
    "EncryptionSettings",
    "FormatError",
    "IntegrityError",
    "SealedToken",
    "StringEncryptor",
    "decrypt",
    "decrypt_optional",
    "default_key_cache",
    "derive_key",
    "encrypt",
    "encrypt_optional",
    "get_settings",
    "is_token",
]

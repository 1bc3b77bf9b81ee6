"""String encryption and decryption using AES-256-GCM."""

import logging
import secrets

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cyclecrypt.constants import NONCE_LENGTH, TAG_LENGTH
from cyclecrypt.exceptions import FormatError, IntegrityError
from cyclecrypt.kdf import DerivedKeyCache, default_key_cache, require_secret
from cyclecrypt.settings import get_settings
from cyclecrypt.token import SealedToken

logger = logging.getLogger(__name__)


class StringEncryptor:
    """Encrypts and decrypts strings with a key derived from a secret.

    Every call to ``encrypt`` draws a fresh random nonce, so the same
    plaintext never produces the same token. ``decrypt`` verifies the GCM
    authentication tag before anything is returned: a tampered token, or one
    sealed under a different secret, raises :class:`IntegrityError`.
    """

    def __init__(self, secret: str | None, key_cache: DerivedKeyCache = default_key_cache) -> None:
        self._aesgcm = AESGCM(key_cache.get(require_secret(secret)))

    def encrypt(self, plaintext: str) -> str:
        """Encrypt a plaintext string, returning a lowercase hex token."""
        try:
            data = plaintext.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FormatError("Plaintext is not encodable as UTF-8") from exc

        nonce = secrets.token_bytes(NONCE_LENGTH)
        # AESGCM appends the tag to the ciphertext
        sealed = self._aesgcm.encrypt(nonce, data, None)
        return SealedToken(nonce=nonce, tag=sealed[-TAG_LENGTH:], ciphertext=sealed[:-TAG_LENGTH]).encode()

    def decrypt(self, token: str) -> str:
        """Decrypt a hex token, returning the original plaintext.

        Raises:
            FormatError: If the token is malformed or the payload is not UTF-8.
            IntegrityError: If the authentication tag does not verify.
        """
        parsed = SealedToken.decode(token)
        try:
            data = self._aesgcm.decrypt(parsed.nonce, parsed.ciphertext + parsed.tag, None)
        except InvalidTag as exc:
            logger.warning(
                "Token failed integrity verification",
                extra={"error": "IntegrityError", "ciphertext_bytes": len(parsed.ciphertext)},
            )
            raise IntegrityError() from exc

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FormatError("Decrypted payload is not valid UTF-8") from exc


def _configured_encryptor() -> StringEncryptor:
    """Build an encryptor from ``ENCRYPTION_SECRET``; fails fast if unset."""
    return StringEncryptor(get_settings().encryption_secret)


def encrypt(plaintext: str) -> str:
    """Encrypt ``plaintext`` under the configured secret."""
    return _configured_encryptor().encrypt(plaintext)


def decrypt(token: str) -> str:
    """Decrypt a token produced by :func:`encrypt` under the configured secret."""
    return _configured_encryptor().decrypt(token)


def encrypt_optional(value: str | None) -> str | None:
    """Encrypt a nullable value; ``None`` and ``""`` are stored as ``None``."""
    if not value:
        return None
    return encrypt(value)


def decrypt_optional(token: str | None) -> str | None:
    """Decrypt a nullable stored token; ``None`` and ``""`` yield ``None``."""
    if not token:
        return None
    return decrypt(token)

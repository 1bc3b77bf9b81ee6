"""Key derivation: turn the configured secret into an AES-256 key."""

import hashlib
import logging
import threading

from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from cyclecrypt.constants import KDF_SALT, KEY_LENGTH, SCRYPT_N, SCRYPT_P, SCRYPT_R
from cyclecrypt.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def require_secret(secret: str | None) -> str:
    """Return ``secret`` unchanged, or raise if it is unset or empty.

    Raises:
        ConfigurationError: With detail ``"not set"`` for ``None`` and
            ``"empty string"`` for ``""``.
    """
    if secret is None:
        raise ConfigurationError("not set")
    if not secret:
        raise ConfigurationError("empty string")
    return secret


def derive_key(secret: str | None) -> bytes:
    """Derive a 32-byte key from ``secret`` with scrypt and the application salt.

    Deliberately slow (N=2^14, r=8, p=1). The result depends only on the
    secret, so the same secret always reconstructs the same key.

    Raises:
        ConfigurationError: If ``secret`` is empty or ``None``.
    """
    secret = require_secret(secret)
    kdf = Scrypt(salt=KDF_SALT, length=KEY_LENGTH, n=SCRYPT_N, r=SCRYPT_R, p=SCRYPT_P)
    return kdf.derive(secret.encode("utf-8"))


class DerivedKeyCache:
    """Read-through cache of derived keys, computed once per secret.

    Thread-safe: a short-lived guard lock hands out one lock per entry, and
    the expensive derivation runs under that entry lock only. Concurrent
    callers asking for the same secret wait for the first derivation;
    callers with different secrets proceed in parallel.

    Entries are keyed by a SHA-256 digest so the secret itself is not
    retained by the cache.
    """

    def __init__(self) -> None:
        self._keys: dict[bytes, bytes] = {}
        self._entry_locks: dict[bytes, threading.Lock] = {}
        self._guard = threading.Lock()

    def get(self, secret: str | None) -> bytes:
        """Return the derived key for ``secret``, deriving it on first use.

        Raises:
            ConfigurationError: If ``secret`` is empty or ``None``.
        """
        secret = require_secret(secret)
        cache_key = hashlib.sha256(secret.encode("utf-8")).digest()
        key = self._keys.get(cache_key)
        if key is not None:
            return key

        with self._guard:
            entry_lock = self._entry_locks.setdefault(cache_key, threading.Lock())

        with entry_lock:
            key = self._keys.get(cache_key)
            if key is None:
                logger.debug("Deriving encryption key (cache miss)")
                key = derive_key(secret)
                self._keys[cache_key] = key
        return key

    def clear(self) -> None:
        """Drop every cached key."""
        with self._guard:
            self._keys.clear()
            self._entry_locks.clear()

    def __len__(self) -> int:
        return len(self._keys)


default_key_cache = DerivedKeyCache()

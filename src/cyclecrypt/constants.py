"""Centralized constants for the token format and key derivation."""

# --- Service identity ---

SERVICE_NAME = "cyclecrypt"

# --- Configuration ---

SECRET_ENV_VAR = "ENCRYPTION_SECRET"
DEFAULT_LOG_LEVEL = "INFO"

# --- Cipher ---

KEY_LENGTH = 32  # bytes, AES-256
NONCE_LENGTH = 16  # bytes
TAG_LENGTH = 16  # bytes

# Hex characters taken by the fixed-size header (nonce + tag)
HEADER_HEX_LENGTH = 2 * (NONCE_LENGTH + TAG_LENGTH)

# --- Key derivation (scrypt) ---

# Not secret. Changing it invalidates every token already issued.
KDF_SALT = b"cycles-app-salt"
SCRYPT_N = 2**14
SCRYPT_R = 8
SCRYPT_P = 1

"""Hex wire format for sealed values: ``nonce || tag || ciphertext``."""

import re
from dataclasses import dataclass

from cyclecrypt.constants import HEADER_HEX_LENGTH, NONCE_LENGTH, TAG_LENGTH
from cyclecrypt.exceptions import FormatError

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


@dataclass(frozen=True, slots=True)
class SealedToken:
    """The three binary fields carried by a token.

    Output format::

        hex(nonce[16]) + hex(tag[16]) + hex(ciphertext[n])

    Nonce and tag sizes are fixed, so the token needs no separators or
    length prefixes. Encoding is lowercase; decoding accepts either case.
    """

    nonce: bytes
    tag: bytes
    ciphertext: bytes

    def __post_init__(self) -> None:
        if len(self.nonce) != NONCE_LENGTH:
            raise FormatError(f"Nonce must be {NONCE_LENGTH} bytes, got {len(self.nonce)}")
        if len(self.tag) != TAG_LENGTH:
            raise FormatError(f"Authentication tag must be {TAG_LENGTH} bytes, got {len(self.tag)}")

    def encode(self) -> str:
        """Return the token as a lowercase hex string."""
        return (self.nonce + self.tag + self.ciphertext).hex()

    @classmethod
    def decode(cls, token: str) -> "SealedToken":
        """Parse a hex token into its nonce, tag and ciphertext.

        Raises:
            FormatError: If ``token`` is not an even-length hex string of at
                least 64 characters.
        """
        if not isinstance(token, str):
            raise FormatError(f"Token must be a string, got {type(token).__name__}")
        if len(token) < HEADER_HEX_LENGTH:
            raise FormatError(f"Token too short: {len(token)} hex characters, need at least {HEADER_HEX_LENGTH}")
        if len(token) % 2:
            raise FormatError("Token has an odd number of hex characters")
        if not _HEX_RE.fullmatch(token):
            raise FormatError("Token is not valid hexadecimal")

        raw = bytes.fromhex(token)
        return cls(
            nonce=raw[:NONCE_LENGTH],
            tag=raw[NONCE_LENGTH : NONCE_LENGTH + TAG_LENGTH],
            ciphertext=raw[NONCE_LENGTH + TAG_LENGTH :],
        )


def is_token(value: object) -> bool:
    """Return True if ``value`` has the shape of a token.

    Structural only: no key is involved, so a True result does not mean the
    token will decrypt.
    """
    try:
        SealedToken.decode(value)  # type: ignore[arg-type]
    except FormatError:
        return False
    return True

"""
Module 02 - Hashing Utilities
Double-SHA256 hashing and the display/internal byte-order conversion.

Owner: Protocol/Crypto Engineer
Module ID: M02

This module provides:
- SHA-256 and double SHA-256 for raw bytes
- Strict hex decoding (even length, hex characters only)
- The single conversion point between display-order hex digests
  and internal-order digest bytes

Byte Order Notes:
- Digests are shown as hex in display order, which is the reverse
  of the order the hash function produced them in
- digest_from_hex() decodes then reverses; digest_to_hex() reverses
  then encodes. Nothing else in the code base reverses digest bytes
- All hashing operates on internal-order bytes
"""
from __future__ import annotations

import hashlib
import re

from core.schemas.errors import ErrorCodes, InvalidInputException


# Size of a SHA-256 digest in bytes
DIGEST_SIZE: int = 32

# bytes.fromhex() skips whitespace, so characters are checked up front
_HEX_CHARS = re.compile(r"[0-9a-fA-F]*")


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash of raw bytes.

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    return hashlib.sha256(data).digest()


def sha256d(data: bytes) -> bytes:
    """
    Double SHA-256: sha256(sha256(data)).

    This is the hash used for transaction ids and Merkle tree nodes.

    Args:
        data: Raw bytes to hash

    Returns:
        32-byte digest in internal byte order
    """
    return sha256(sha256(data))


def hash_concat(left: bytes, right: bytes) -> bytes:
    """
    Double-hash the concatenation of two digests.

    Used for Merkle parent nodes: parent = sha256d(left + right)
    """
    return sha256d(left + right)


def decode_hex(hex_string: str, field: str = "value") -> bytes:
    """
    Decode a hex string to bytes.

    Args:
        hex_string: Hex string without prefix (either case)
        field: Name used in error messages

    Returns:
        Decoded bytes

    Raises:
        InvalidInputException: If the value is not a string, has odd length,
            or contains non-hex characters
    """
    if not isinstance(hex_string, str):
        raise InvalidInputException(
            f"{field} must be a hex string, got {type(hex_string).__name__}",
            code=ErrorCodes.INVALID_HEX,
            field_path=field,
        )

    if len(hex_string) % 2 != 0:
        raise InvalidInputException(
            f"{field} must have even length, got length {len(hex_string)}",
            code=ErrorCodes.INVALID_HEX,
            field_path=field,
        )

    if not _HEX_CHARS.fullmatch(hex_string):
        bad = next(c for c in hex_string if c not in "0123456789abcdefABCDEF")
        raise InvalidInputException(
            f"{field} contains invalid hex character {bad!r}",
            code=ErrorCodes.INVALID_HEX,
            field_path=field,
        )

    return bytes.fromhex(hex_string)


def reverse_bytes(data: bytes) -> bytes:
    """Return data with its byte order reversed."""
    return data[::-1]


def ensure_digest(digest: bytes, field: str = "digest") -> bytes:
    """
    Check that a raw digest is exactly DIGEST_SIZE bytes.

    Raises:
        InvalidInputException: On any other length; digests are never
            padded or truncated
    """
    if not isinstance(digest, (bytes, bytearray)):
        raise InvalidInputException(
            f"{field} must be bytes, got {type(digest).__name__}",
            code=ErrorCodes.INVALID_DIGEST_LENGTH,
            field_path=field,
        )
    if len(digest) != DIGEST_SIZE:
        raise InvalidInputException(
            f"{field} must be {DIGEST_SIZE} bytes, got {len(digest)}",
            code=ErrorCodes.INVALID_DIGEST_LENGTH,
            field_path=field,
            details={"length": len(digest)},
        )
    return bytes(digest)


def digest_from_hex(display_hex: str, field: str = "digest") -> bytes:
    """
    Convert a display-order hex digest to internal-order bytes.

    Example:
        >>> digest_from_hex("00" * 31 + "01")[0]
        1
    """
    return reverse_bytes(ensure_digest(decode_hex(display_hex, field), field))


def digest_to_hex(digest: bytes, field: str = "digest") -> str:
    """Convert an internal-order digest to its lowercase display-order hex."""
    return reverse_bytes(ensure_digest(digest, field)).hex()


__all__ = [
    "DIGEST_SIZE",
    "sha256",
    "sha256d",
    "hash_concat",
    "decode_hex",
    "reverse_bytes",
    "ensure_digest",
    "digest_from_hex",
    "digest_to_hex",
]

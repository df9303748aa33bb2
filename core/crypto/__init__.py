"""
Core cryptographic utilities.

Module 02 provides double SHA-256 hashing and the byte-order
conversion between display-order hex and internal digest bytes.
"""
from .hashing import (
    DIGEST_SIZE,
    sha256,
    sha256d,
    hash_concat,
    decode_hex,
    reverse_bytes,
    ensure_digest,
    digest_from_hex,
    digest_to_hex,
)

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

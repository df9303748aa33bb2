"""
Module 02 - Hashing Unit Tests
Tests for core/crypto/hashing.py

Tests:
- sha256 / sha256d against hashlib
- strict hex decoding
- display/internal byte-order conversion
- digest length enforcement
"""
import hashlib
import pytest

from core.crypto.hashing import (
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
from core.schemas.errors import ErrorCodes, InvalidInputException


class TestSha256:
    """Tests for sha256() and sha256d()."""
    
    def test_sha256_known_value(self):
        """sha256 matches hashlib for a known input."""
        assert sha256(b"hello") == hashlib.sha256(b"hello").digest()
        assert sha256(b"hello").hex() == (
            "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
        )
    
    def test_sha256d_is_double_hash(self):
        """sha256d hashes the digest of the first pass."""
        data = b"coinbase"
        expected = hashlib.sha256(hashlib.sha256(data).digest()).digest()
        
        assert sha256d(data) == expected
        assert len(sha256d(data)) == DIGEST_SIZE
    
    def test_sha256d_empty_bytes(self):
        """Double hash of empty bytes is well defined."""
        assert sha256d(b"") == hashlib.sha256(hashlib.sha256(b"").digest()).digest()
    
    def test_hash_concat_order_matters(self):
        """hash_concat(a, b) != hash_concat(b, a)."""
        a = sha256(b"a")
        b = sha256(b"b")
        
        assert hash_concat(a, b) == sha256d(a + b)
        assert hash_concat(a, b) != hash_concat(b, a)


class TestDecodeHex:
    """Tests for decode_hex()."""
    
    def test_decodes_both_cases(self):
        """Upper and lower case hex decode to the same bytes."""
        assert decode_hex("abCD01") == bytes([0xAB, 0xCD, 0x01])
        assert decode_hex("ABCD01") == decode_hex("abcd01")
    
    def test_empty_string_is_empty_bytes(self):
        """Empty hex decodes to empty bytes."""
        assert decode_hex("") == b""
    
    def test_odd_length_raises(self):
        """Odd-length hex is rejected."""
        with pytest.raises(InvalidInputException) as exc_info:
            decode_hex("abc", "coinbase")
        
        assert exc_info.value.code == ErrorCodes.INVALID_HEX
        assert exc_info.value.details["field_path"] == "coinbase"
    
    def test_non_hex_characters_raise(self):
        """Non-hex characters are rejected."""
        with pytest.raises(InvalidInputException) as exc_info:
            decode_hex("zz")
        
        assert exc_info.value.code == ErrorCodes.INVALID_HEX
    
    @pytest.mark.parametrize("value", ["ff  ff", "ff\nff", " abc", "ab cd ", "\tabc"])
    def test_whitespace_rejected(self, value):
        """Whitespace is not skipped, even when the length is even."""
        with pytest.raises(InvalidInputException) as exc_info:
            decode_hex(value, "coinbase")

        assert exc_info.value.code == ErrorCodes.INVALID_HEX

    def test_spaced_digest_rejected(self):
        """A 32-byte digest padded with spaces is not a digest."""
        spaced = "00" * 16 + "  " + "00" * 16

        with pytest.raises(InvalidInputException) as exc_info:
            digest_from_hex(spaced, "prevBlockHash")

        assert exc_info.value.code == ErrorCodes.INVALID_HEX
        assert exc_info.value.details["field_path"] == "prevBlockHash"

    def test_non_string_raises(self):
        """Bytes or None are not accepted as hex."""
        with pytest.raises(InvalidInputException):
            decode_hex(b"ab")
        with pytest.raises(InvalidInputException):
            decode_hex(None)


class TestByteOrder:
    """Tests for display/internal digest conversion."""
    
    def test_digest_from_hex_reverses(self):
        """Display hex is reversed into internal order."""
        display = "00" * 31 + "01"
        internal = digest_from_hex(display)
        
        assert internal[0] == 1
        assert internal[1:] == bytes(31)
    
    def test_digest_to_hex_reverses(self):
        """Internal bytes are reversed into display hex."""
        internal = bytes([1]) + bytes(31)
        
        assert digest_to_hex(internal) == "00" * 31 + "01"
    
    def test_double_reversal_is_identity(self):
        """digest_to_hex(digest_from_hex(h)) returns h (lowercased)."""
        display = "7c867bb107787c12e20be74ddaaa6363357464513bff703f55ea016cf02dcaa9"
        
        assert digest_to_hex(digest_from_hex(display)) == display
        assert digest_to_hex(digest_from_hex(display.upper())) == display
    
    def test_reverse_bytes(self):
        """reverse_bytes flips byte order."""
        assert reverse_bytes(b"\x01\x02\x03") == b"\x03\x02\x01"
    
    def test_digest_to_hex_is_lowercase(self):
        """Output hex is lowercase."""
        assert digest_to_hex(bytes([0xAB] * 32)) == "ab" * 32


class TestDigestLength:
    """Digests are exactly 32 bytes."""
    
    @pytest.mark.parametrize("length", [0, 1, 31, 33, 64])
    def test_wrong_length_raises(self, length):
        """Any length other than 32 is rejected, never padded."""
        with pytest.raises(InvalidInputException) as exc_info:
            ensure_digest(bytes(length), "leaf")
        
        assert exc_info.value.code == ErrorCodes.INVALID_DIGEST_LENGTH
        assert exc_info.value.details["length"] == length
    
    def test_short_hex_digest_raises(self):
        """A 31-byte hex digest is rejected."""
        with pytest.raises(InvalidInputException) as exc_info:
            digest_from_hex("ab" * 31, "merkleProof[0]")
        
        assert exc_info.value.code == ErrorCodes.INVALID_DIGEST_LENGTH
        assert exc_info.value.details["field_path"] == "merkleProof[0]"
    
    def test_non_bytes_digest_raises(self):
        """A str is not a raw digest."""
        with pytest.raises(InvalidInputException):
            ensure_digest("ab" * 32)
    
    def test_bytearray_accepted(self):
        """bytearray digests are accepted and returned as bytes."""
        result = ensure_digest(bytearray(32))
        
        assert isinstance(result, bytes)
        assert result == bytes(32)

"""Keccak-256 helpers for EVM word-size hashing.

Keccak-256 here is the pre-standard Keccak used by the EVM, not the
FIPS-202 SHA3-256 found in ``hashlib`` (the padding differs).  The
implementation comes from pycryptodome.
"""

from __future__ import annotations

from Crypto.Hash import keccak

from slotwright.models.slots import WORD_BYTES


def keccak256(data: bytes) -> bytes:
    """Return the raw 32-byte Keccak-256 digest of *data*."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def keccak256_hex(data: bytes) -> str:
    """Return ``0x`` + lowercase hex of Keccak-256(*data*)."""
    return "0x" + keccak256(data).hex()


def word_to_int(word: bytes) -> int:
    """Interpret a 32-byte big-endian word as an unsigned integer."""
    if len(word) != WORD_BYTES:
        raise ValueError(f"expected a {WORD_BYTES}-byte word, got {len(word)} bytes")
    return int.from_bytes(word, "big")


def int_to_word(value: int) -> bytes:
    """Encode an unsigned integer as a 32-byte big-endian word (abi.encode(uint256))."""
    return value.to_bytes(WORD_BYTES, "big")

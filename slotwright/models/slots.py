"""Storage slot models — derivation schemes and the derived 256-bit slot."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

WORD_BITS = 256
WORD_BYTES = WORD_BITS // 8
SLOT_MASK = ((1 << WORD_BITS) - 1) ^ 0xFF  # ~0xff over 256 bits


class SlotScheme(str, Enum):
    """How a namespace identifier is turned into a base slot.

    * ``namespaced`` — ``(keccak256(id) - 1) & ~0xff``.
    * ``erc7201`` — ``keccak256(bytes32(keccak256(id) - 1)) & ~0xff``.
    """

    NAMESPACED = "namespaced"
    ERC7201 = "erc7201"


class DerivedSlot(BaseModel):
    """A 256-bit storage slot whose low byte is always zero."""

    model_config = ConfigDict(frozen=True)

    value: int

    @field_validator("value")
    @classmethod
    def _check_word(cls, v: int) -> int:
        if not 0 <= v < 1 << WORD_BITS:
            raise ValueError("derived slot must fit in an unsigned 256-bit word")
        if v & 0xFF:
            raise ValueError("derived slot must have its low 8 bits cleared")
        return v

    def to_bytes(self) -> bytes:
        """Big-endian 32-byte encoding."""
        return self.value.to_bytes(WORD_BYTES, "big")

    def hex(self) -> str:
        """``0x``-prefixed, zero-padded 64-digit lowercase hex."""
        return "0x" + self.to_bytes().hex()

    def __str__(self) -> str:
        return self.hex()

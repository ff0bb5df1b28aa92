"""Namespaced storage-slot derivation for upgradeable contracts.

A contract author names a logical storage region with a human-readable
identifier (e.g. ``"elite-oracle.storage.DMA"``).  The base slot for that
region is::

    slot = (keccak256(identifier) - 1) & ~0xff

Subtracting one keeps the hashed slot itself unused, and clearing the low
byte leaves 256 consecutive slots for the struct stored at that location.
The ``erc7201`` scheme hashes the decremented word a second time before
masking.

Derivation is pure: no I/O, no shared state, safe from any number of
concurrent callers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from slotwright.core.hasher import int_to_word, keccak256, word_to_int
from slotwright.models.slots import WORD_BYTES, SLOT_MASK, DerivedSlot, SlotScheme

logger = logging.getLogger(__name__)

Hasher = Callable[[bytes], bytes]


class DerivationError(ValueError):
    """Raised when a slot cannot be derived without wrapping around.

    The only trigger is a zero hash output: ``0 - 1`` would wrap to the
    maximum 256-bit value.  Retrying with the same identifier fails again.
    """


def identifier_bytes(identifier: str) -> bytes:
    """UTF-8 bytes of *identifier*, defined for every ``str``.

    Undecodable argv bytes arrive as ``\\udc80``-``\\udcff`` escapes and are
    restored to the original byte; any other lone surrogate is encoded as-is.
    """
    try:
        return identifier.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return identifier.encode("utf-8", "surrogatepass")


class SlotDeriver:
    """Derives deterministic, collision-resistant storage slots.

    Parameters
    ----------
    hasher:
        The 256-bit hash primitive.  Defaults to Keccak-256; tests inject a
        stub to exercise the zero-hash guard.
    scheme:
        Default ``SlotScheme`` used by ``derive()``.

    Examples
    --------
    >>> deriver = SlotDeriver()
    >>> deriver.derive("example.main").value & 0xFF
    0
    """

    def __init__(
        self,
        hasher: Hasher = keccak256,
        *,
        scheme: SlotScheme = SlotScheme.NAMESPACED,
    ) -> None:
        self._hasher = hasher
        self._scheme = SlotScheme(scheme)

    @property
    def scheme(self) -> SlotScheme:
        return self._scheme

    def _hash_word(self, data: bytes) -> int:
        digest = self._hasher(data)
        if len(digest) != WORD_BYTES:
            raise DerivationError(
                f"hash primitive returned {len(digest)} bytes, expected {WORD_BYTES}"
            )
        return word_to_int(digest)

    def derive(
        self, identifier: str, *, scheme: SlotScheme | None = None
    ) -> DerivedSlot:
        """Derive the base storage slot for *identifier*.

        Any string is accepted, including the empty string and strings
        holding surrogates.  The identifier is hashed as UTF-8.

        Raises
        ------
        DerivationError
            If the identifier hashes to zero.
        """
        scheme = self._scheme if scheme is None else SlotScheme(scheme)

        h = self._hash_word(identifier_bytes(identifier))
        if h == 0:
            raise DerivationError(
                f"hash of namespace {identifier!r} is zero; "
                "decrementing it would wrap around"
            )
        raw = h - 1

        if scheme is SlotScheme.ERC7201:
            raw = self._hash_word(int_to_word(raw))

        slot = DerivedSlot(value=raw & SLOT_MASK)
        logger.debug("Derived %s slot for %r: %s", scheme.value, identifier, slot)
        return slot


_DEFAULT_DERIVER = SlotDeriver()


def derive_storage_slot(
    identifier: str, *, scheme: SlotScheme = SlotScheme.NAMESPACED
) -> DerivedSlot:
    """Derive a slot with the default Keccak-256 deriver."""
    return _DEFAULT_DERIVER.derive(identifier, scheme=scheme)

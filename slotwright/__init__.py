"""Slotwright: namespaced storage slots and multi-chain deployment config.

- Deterministic Keccak-256 storage-slot derivation for upgradeable contracts
- Immutable registry of the supported chains
- Resolution of per-chain network credentials and explorer API keys
- Assembly of the complete deployment driver document
"""

__version__ = "0.1.0"
__description__ = (
    "Namespaced storage-slot derivation and multi-chain deployment configuration"
)

from slotwright.core.chain_registry import (
    SUPPORTED_CHAINS,
    ChainRegistry,
    UnknownChainError,
    default_registry,
)
from slotwright.core.config_resolver import (
    ConfigResolver,
    MissingCredentialError,
    resolve_all,
)
from slotwright.core.slot_deriver import (
    DerivationError,
    SlotDeriver,
    derive_storage_slot,
)

__all__ = [
    "SlotDeriver",
    "DerivationError",
    "derive_storage_slot",
    "ChainRegistry",
    "UnknownChainError",
    "SUPPORTED_CHAINS",
    "default_registry",
    "ConfigResolver",
    "MissingCredentialError",
    "resolve_all",
    "__version__",
]

"""Slotwright data models — all Pydantic v2, all frozen (immutable)."""

from slotwright.models.chains import ChainDescriptor
from slotwright.models.deployment import (
    ChainConfiguration,
    CompilerSettings,
    DeploymentConfig,
    NetworkEntry,
    ProjectPaths,
    VerificationEntry,
)
from slotwright.models.slots import DerivedSlot, SlotScheme

__all__ = [
    # chains
    "ChainDescriptor",
    # slots
    "DerivedSlot",
    "SlotScheme",
    # deployment
    "NetworkEntry",
    "VerificationEntry",
    "ChainConfiguration",
    "CompilerSettings",
    "ProjectPaths",
    "DeploymentConfig",
]

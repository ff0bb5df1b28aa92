"""Chain descriptor model — one supported network and its explorer endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ChainDescriptor(BaseModel):
    """Static description of a supported chain.

    Descriptors are compiled-in constants owned by the ``ChainRegistry``.
    ``name`` is the registry key and doubles as the network name handed to
    the deployment driver.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    chain_id: int = Field(ge=0)
    rpc_url: str
    explorer_api_url: str  # used for contract source verification
    explorer_browser_url: str

"""Resolved deployment models — per-chain network/verification entries and
the complete document handed to the deployment driver.

Secrets (signing credentials, explorer API keys) are held as ``SecretStr``
so that ``repr()``, logs and default renderings never expose them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr

MASKED = "**********"


def _render(secret: SecretStr, reveal: bool) -> str:
    return secret.get_secret_value() if reveal else MASKED


class NetworkEntry(BaseModel):
    """Connection info for one chain bound to its signing credential."""

    model_config = ConfigDict(frozen=True)

    network: str
    url: str
    chain_id: int = Field(ge=0)
    credential: SecretStr

    def to_driver_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {
            "url": self.url,
            "chainId": self.chain_id,
            "accounts": [_render(self.credential, reveal_secrets)],
        }


class VerificationEntry(BaseModel):
    """Explorer endpoints for one chain bound to its API key (or the sentinel)."""

    model_config = ConfigDict(frozen=True)

    network: str
    chain_id: int = Field(ge=0)
    api_key_env_var: str
    api_key: SecretStr
    has_api_key: bool  # False when the sentinel was substituted
    api_url: str
    browser_url: str

    def rendered_api_key(self, *, reveal_secrets: bool = False) -> str:
        # The sentinel carries no secret, so it is always shown as-is.
        if not self.has_api_key:
            return self.api_key.get_secret_value()
        return _render(self.api_key, reveal_secrets)

    def to_custom_chain(self) -> dict[str, Any]:
        return {
            "network": self.network,
            "chainId": self.chain_id,
            "urls": {"apiURL": self.api_url, "browserURL": self.browser_url},
        }


class ChainConfiguration(BaseModel):
    """Both resolved entries for a single registered chain."""

    model_config = ConfigDict(frozen=True)

    network: NetworkEntry
    verification: VerificationEntry


class CompilerSettings(BaseModel):
    """One solc compiler profile."""

    model_config = ConfigDict(frozen=True)

    version: str = "0.8.20"
    evm_version: str | None = "london"
    optimizer_enabled: bool = True
    optimizer_runs: int = Field(default=200, ge=1)

    def to_driver_dict(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.evm_version:
            settings["evmVersion"] = self.evm_version
        settings["optimizer"] = {
            "enabled": self.optimizer_enabled,
            "runs": self.optimizer_runs,
        }
        return {"version": self.version, "settings": settings}


class ProjectPaths(BaseModel):
    """Source/test/cache/artifact directories as seen by the driver."""

    model_config = ConfigDict(frozen=True)

    sources: str = "./src"
    tests: str = "./src/test"
    cache: str = "./cache"
    artifacts: str = "./artifacts"


class DeploymentConfig(BaseModel):
    """The complete configuration document consumed by the deployment driver.

    ``chains`` preserves registry order.  ``to_driver_dict()`` renders the
    camelCase layout the driver expects; secrets are masked unless
    ``reveal_secrets=True`` is passed explicitly.
    """

    model_config = ConfigDict(frozen=True)

    default_network: str = "hardhat"
    compilers: tuple[CompilerSettings, ...] = (CompilerSettings(),)
    chains: dict[str, ChainConfiguration] = Field(default_factory=dict)
    paths: ProjectPaths = ProjectPaths()

    def to_driver_dict(self, *, reveal_secrets: bool = False) -> dict[str, Any]:
        return {
            "defaultNetwork": self.default_network,
            "solidity": {
                "compilers": [c.to_driver_dict() for c in self.compilers],
            },
            "networks": {
                name: cfg.network.to_driver_dict(reveal_secrets=reveal_secrets)
                for name, cfg in self.chains.items()
            },
            "etherscan": {
                "apiKey": {
                    name: cfg.verification.rendered_api_key(
                        reveal_secrets=reveal_secrets
                    )
                    for name, cfg in self.chains.items()
                },
                "customChains": [
                    cfg.verification.to_custom_chain()
                    for cfg in self.chains.values()
                ],
            },
            "paths": self.paths.model_dump(),
        }

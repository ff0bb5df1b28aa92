"""Deployment config assembly — one resolution pass turned into the driver document."""

from __future__ import annotations

import logging

from slotwright.config import SlotwrightSettings
from slotwright.core.chain_registry import ChainRegistry
from slotwright.core.config_resolver import ConfigResolver, SecretSource
from slotwright.models.deployment import CompilerSettings, DeploymentConfig

logger = logging.getLogger(__name__)


def compiler_settings(settings: SlotwrightSettings) -> CompilerSettings:
    return CompilerSettings(
        version=settings.solidity_version,
        evm_version=settings.evm_version or None,
        optimizer_enabled=settings.optimizer_enabled,
        optimizer_runs=settings.optimizer_runs,
    )


def build_deployment_config(
    registry: ChainRegistry,
    secret_source: SecretSource,
    settings: SlotwrightSettings | None = None,
    *,
    credential: str | None = None,
    chain_credentials: dict[str, str] | None = None,
) -> DeploymentConfig:
    """Resolve every chain in *registry* and wrap the result for the driver.

    Raises ``MissingCredentialError`` (from the resolver) if no signing
    credential is available; nothing is built in that case.
    """
    settings = settings or SlotwrightSettings()
    resolver = ConfigResolver(
        secret_source,
        credential=credential,
        credential_var=settings.credential_var,
        chain_credentials=chain_credentials,
        api_key_sentinel=settings.api_key_sentinel,
    )
    chains = resolver.resolve_all(registry)

    config = DeploymentConfig(
        default_network=settings.default_network,
        compilers=(compiler_settings(settings),),
        chains=chains,
    )
    logger.debug(
        "Built deployment config: default=%s, networks=%s",
        config.default_network,
        list(config.chains),
    )
    return config

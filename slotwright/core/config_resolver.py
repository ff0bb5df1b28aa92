"""Config resolver — binds registered chains to credentials and API keys.

For every chain in a ``ChainRegistry`` the resolver produces:

* a ``NetworkEntry``: RPC URL and chain id bound to a signing credential;
* a ``VerificationEntry``: explorer URLs bound to the key found in
  ``<NAME_UPPER_WITH_UNDERSCORES>_API_KEY``, or to the ``"not-needed"``
  sentinel when that variable is absent or empty.

Secrets come from an injected lookup callable, never from a hidden global,
so tests can pass a plain dict.  By default one credential is shared by
every chain; callers who want distinct signers pass ``chain_credentials``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping

from pydantic import SecretStr

from slotwright.core.chain_registry import ChainRegistry, UnknownChainError
from slotwright.models.chains import ChainDescriptor
from slotwright.models.deployment import (
    ChainConfiguration,
    NetworkEntry,
    VerificationEntry,
)

logger = logging.getLogger(__name__)

SecretSource = Callable[[str], str | None]

DEFAULT_CREDENTIAL_VAR = "PRIVATE_KEY"
API_KEY_SENTINEL = "not-needed"


class MissingCredentialError(RuntimeError):
    """Raised when a chain would have no signing credential.

    Raised once, before any entry is built; a resolution pass never
    returns partial results.
    """


# ---------------------------------------------------------------------------
# Secret sources
# ---------------------------------------------------------------------------


def mapping_secret_source(values: Mapping[str, str]) -> SecretSource:
    """Secret source backed by a fixed mapping."""
    return values.get


def environ_secret_source(environ: Mapping[str, str] | None = None) -> SecretSource:
    """Secret source backed by the process environment (read at lookup time)."""
    if environ is not None:
        return mapping_secret_source(environ)
    return os.environ.get


def api_key_env_var(chain_name: str) -> str:
    """Environment variable holding the explorer API key for *chain_name*.

    Every hyphen becomes an underscore: ``dfk-testnet`` → ``DFK_TESTNET_API_KEY``.
    """
    return f"{chain_name.upper().replace('-', '_')}_API_KEY"


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


class ConfigResolver:
    """Resolves per-chain network and verification configuration.

    Parameters
    ----------
    secret_source:
        Callable mapping a variable name to its value or ``None``.
    credential:
        Shared signing credential.  When omitted it is read from
        *credential_var* in the secret source.
    credential_var:
        Name of the shared signing-credential variable.
    chain_credentials:
        Per-chain credential overrides keyed by chain name.  Every key must
        name a registered chain.
    api_key_sentinel:
        Value substituted when a chain has no explorer API key.
    """

    def __init__(
        self,
        secret_source: SecretSource,
        *,
        credential: str | None = None,
        credential_var: str = DEFAULT_CREDENTIAL_VAR,
        chain_credentials: Mapping[str, str] | None = None,
        api_key_sentinel: str = API_KEY_SENTINEL,
    ) -> None:
        self._secret_source = secret_source
        self._credential = credential
        self._credential_var = credential_var
        self._chain_credentials = dict(chain_credentials or {})
        self._api_key_sentinel = api_key_sentinel

    def _lookup(self, key: str) -> str | None:
        value = self._secret_source(key)
        return value or None  # empty counts as absent

    def _bind_credentials(self, chains: tuple[ChainDescriptor, ...]) -> dict[str, str]:
        """Pick a credential for every chain, failing before any entry is built."""
        names = [chain.name for chain in chains]
        for key in self._chain_credentials:
            if key not in names:
                logger.error("Credential override for unregistered chain %r.", key)
                raise UnknownChainError(key, names)

        shared = self._credential or self._lookup(self._credential_var)
        bound: dict[str, str] = {}
        missing: list[str] = []

        for chain in chains:
            value = self._chain_credentials.get(chain.name) or shared
            if value:
                bound[chain.name] = value
            else:
                missing.append(chain.name)

        if missing:
            msg = (
                f"No signing credential for chain(s) {', '.join(missing)}. "
                f"Set {self._credential_var} or pass an explicit credential."
            )
            logger.error(msg)
            raise MissingCredentialError(msg)

        return bound

    def _verification_entry(self, chain: ChainDescriptor) -> VerificationEntry:
        var = api_key_env_var(chain.name)
        key = self._lookup(var)
        if key is None:
            logger.warning(
                "%s not set; using %r for %s verification.",
                var,
                self._api_key_sentinel,
                chain.name,
            )
        return VerificationEntry(
            network=chain.name,
            chain_id=chain.chain_id,
            api_key_env_var=var,
            api_key=SecretStr(key if key is not None else self._api_key_sentinel),
            has_api_key=key is not None,
            api_url=chain.explorer_api_url,
            browser_url=chain.explorer_browser_url,
        )

    def resolve_all(self, registry: ChainRegistry) -> dict[str, ChainConfiguration]:
        """Resolve every registered chain, in registry order.

        Raises
        ------
        MissingCredentialError
            If any chain would be left without a signing credential.
        UnknownChainError
            If ``chain_credentials`` names a chain that is not registered.
        """
        chains = registry.all()
        credentials = self._bind_credentials(chains)

        resolved: dict[str, ChainConfiguration] = {}
        for chain in chains:
            resolved[chain.name] = ChainConfiguration(
                network=NetworkEntry(
                    network=chain.name,
                    url=chain.rpc_url,
                    chain_id=chain.chain_id,
                    credential=SecretStr(credentials[chain.name]),
                ),
                verification=self._verification_entry(chain),
            )

        logger.info("Resolved configuration for %d chain(s).", len(resolved))
        return resolved


def resolve_all(
    registry: ChainRegistry,
    secret_source: SecretSource,
    **kwargs: object,
) -> dict[str, ChainConfiguration]:
    """Convenience wrapper: ``ConfigResolver(secret_source, **kwargs).resolve_all(registry)``."""
    return ConfigResolver(secret_source, **kwargs).resolve_all(registry)  # type: ignore[arg-type]

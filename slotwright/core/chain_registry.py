"""Chain registry — the immutable table of supported networks.

The registry is built once from a fixed list of ``ChainDescriptor`` values
and never changes afterwards.  It owns no I/O and takes no locks; any number
of readers may share a single instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from slotwright.models.chains import ChainDescriptor


class UnknownChainError(KeyError):
    """Raised when looking up a chain that is not registered."""

    def __init__(self, key: object, available: Iterable[str]) -> None:
        self.key = key
        self.available = tuple(available)
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown chain {self.key!r}. Available: {list(self.available)}"


class DuplicateChainError(ValueError):
    """Raised when two descriptors share a name or a chain id."""


SUPPORTED_CHAINS: tuple[ChainDescriptor, ...] = (
    ChainDescriptor(
        name="avalanche",
        chain_id=43_114,
        rpc_url="https://api.avax.network/ext/bc/C/rpc",
        explorer_api_url="https://api.snowtrace.io/api",
        explorer_browser_url="https://snowtrace.io",
    ),
    ChainDescriptor(
        name="dfk",
        chain_id=53_935,
        rpc_url="https://subnets.avax.network/defi-kingdoms/dfk-chain/rpc",
        explorer_api_url="https://api.routescan.io/v2/network/mainnet/evm/53935/etherscan",
        explorer_browser_url="https://53935.routescan.io",
    ),
    ChainDescriptor(
        name="dfk-testnet",
        chain_id=335,
        rpc_url="https://subnets.avax.network/defi-kingdoms/dfk-chain-testnet/rpc",
        explorer_api_url="https://api.routescan.io/v2/network/testnet/evm/335/etherscan",
        explorer_browser_url="https://subnets-test.avax.network/defi-kingdoms/",
    ),
    ChainDescriptor(
        name="klaytn",
        chain_id=8_217,
        rpc_url="https://public-node-api.klaytnapi.com/v1/cypress",
        explorer_api_url="https://scope.klaytn.com/api",
        explorer_browser_url="https://scope.klaytn.com/",
    ),
)


class ChainRegistry:
    """Read-only, ordered collection of chain descriptors keyed by name.

    Parameters
    ----------
    descriptors:
        The chains to register, in the order ``all()`` will return them.

    Raises
    ------
    DuplicateChainError
        If two descriptors share a ``name`` or a ``chain_id``.

    Examples
    --------
    >>> registry = default_registry()
    >>> registry.lookup("dfk").chain_id
    53935
    >>> [c.name for c in registry.all()]
    ['avalanche', 'dfk', 'dfk-testnet', 'klaytn']
    """

    __slots__ = ("_chains", "_by_name", "_by_chain_id")

    def __init__(self, descriptors: Iterable[ChainDescriptor]) -> None:
        chains = tuple(descriptors)
        by_name: dict[str, ChainDescriptor] = {}
        by_chain_id: dict[int, ChainDescriptor] = {}

        for chain in chains:
            if chain.name in by_name:
                raise DuplicateChainError(f"Duplicate chain name {chain.name!r}")
            if chain.chain_id in by_chain_id:
                other = by_chain_id[chain.chain_id]
                raise DuplicateChainError(
                    f"Chain id {chain.chain_id} used by both "
                    f"{other.name!r} and {chain.name!r}"
                )
            by_name[chain.name] = chain
            by_chain_id[chain.chain_id] = chain

        self._chains = chains
        self._by_name = MappingProxyType(by_name)
        self._by_chain_id = MappingProxyType(by_chain_id)

    # -- Lookup --------------------------------------------------------------

    def lookup(self, name: str) -> ChainDescriptor:
        """Return the descriptor registered under *name*.

        Raises ``UnknownChainError`` if *name* is not registered.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownChainError(name, self._by_name) from None

    def lookup_by_chain_id(self, chain_id: int) -> ChainDescriptor:
        """Return the descriptor whose chain id is *chain_id*."""
        try:
            return self._by_chain_id[chain_id]
        except KeyError:
            raise UnknownChainError(chain_id, self._by_name) from None

    # -- Enumeration ---------------------------------------------------------

    def all(self) -> tuple[ChainDescriptor, ...]:
        """All descriptors in registration order."""
        return self._chains

    def names(self) -> tuple[str, ...]:
        return tuple(c.name for c in self._chains)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ChainDescriptor]:
        return iter(self._chains)

    def __len__(self) -> int:
        return len(self._chains)

    def __repr__(self) -> str:
        return f"ChainRegistry({list(self.names())!r})"


def default_registry() -> ChainRegistry:
    """Build a registry holding the compiled-in ``SUPPORTED_CHAINS``."""
    return ChainRegistry(SUPPORTED_CHAINS)

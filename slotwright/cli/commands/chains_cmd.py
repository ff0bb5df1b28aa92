"""``slotwright chains`` — show the supported chain registry."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from slotwright.core.chain_registry import default_registry
from slotwright.core.config_resolver import api_key_env_var


def chains_cmd() -> None:
    """List the supported chains with their endpoints."""
    console = Console()
    registry = default_registry()

    table = Table(title="Supported Chains", header_style="bold cyan")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Chain ID", justify="right", style="green", no_wrap=True)
    table.add_column("RPC URL")
    table.add_column("Explorer")
    table.add_column("API key variable", style="dim")

    for chain in registry.all():
        table.add_row(
            chain.name,
            str(chain.chain_id),
            chain.rpc_url,
            chain.explorer_browser_url,
            api_key_env_var(chain.name),
        )

    console.print(table)

"""``slotwright generate-storage-location`` — derive a namespaced storage slot.

Prints the 32-byte slot as ``0x``-prefixed hex on stdout, nothing else, so
the output can be pasted into a contract constant or captured by a script.
"""

from __future__ import annotations

import typer
from rich.console import Console

from slotwright.core.slot_deriver import DerivationError, derive_storage_slot
from slotwright.models.slots import SlotScheme

err_console = Console(stderr=True)


def generate_storage_location_cmd(
    identifier: str = typer.Argument(
        "",
        help="Namespace identifier, e.g. 'elite-oracle.storage.DMA'.",
    ),
    scheme: SlotScheme = typer.Option(
        SlotScheme.NAMESPACED,
        "--scheme",
        "-s",
        case_sensitive=False,
        help="Derivation scheme.",
    ),
) -> None:
    """Generate the storage location for a namespace identifier."""
    try:
        slot = derive_storage_slot(identifier, scheme=scheme)
    except DerivationError as e:
        err_console.print(f"[red]Derivation failed:[/red] {e}")
        raise typer.Exit(code=1)

    typer.echo(slot.hex())

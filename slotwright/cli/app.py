"""Main Typer application — imports and registers all CLI commands.

Entry point: ``slotwright`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError

from slotwright.cli.commands.chains_cmd import chains_cmd
from slotwright.cli.commands.resolve_cmd import resolve_config_cmd
from slotwright.cli.commands.storage_location import generate_storage_location_cmd
from slotwright.config import LogLevel, SlotwrightSettings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="slotwright",
    help="Namespaced storage slots and multi-chain deployment configuration.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


def _configured_log_level() -> tuple[LogLevel, str | None]:
    """Level from SLOTWRIGHT_LOG_LEVEL / .env, or INFO if settings are invalid."""
    try:
        return SlotwrightSettings().log_level, None
    except ValidationError as e:
        return LogLevel.INFO, f"Ignoring invalid settings for logging: {e.error_count()} error(s)"


@app.callback()
def main_callback(
    log_level: LogLevel = typer.Option(
        None,
        "--log-level",
        case_sensitive=False,
        help="Logging level (defaults to SLOTWRIGHT_LOG_LEVEL or INFO).",
    ),
) -> None:
    """Configure logging before any command runs."""
    problem = None
    if log_level is None:
        log_level, problem = _configured_log_level()

    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if problem:
        logger.warning(problem)


# Register subcommands
app.command(
    name="generate-storage-location",
    help="Generate a storage location for a contract namespace.",
)(generate_storage_location_cmd)
app.command(name="chains", help="List the supported chains.")(chains_cmd)
app.command(
    name="resolve-config",
    help="Resolve network and verification config for every chain.",
)(resolve_config_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()

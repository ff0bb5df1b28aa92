"""``slotwright resolve-config`` — emit the deployment driver configuration.

Loads a ``.env`` file (without overriding variables already set), resolves
every registered chain against the process environment, and writes the
driver document as JSON.  Secrets are masked unless ``--reveal-secrets`` is
given.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from slotwright.config import SlotwrightSettings
from slotwright.core.chain_registry import default_registry
from slotwright.core.config_resolver import MissingCredentialError, environ_secret_source
from slotwright.core.deployment import build_deployment_config

console = Console()
err_console = Console(stderr=True)


def resolve_config_cmd(
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON document here instead of stdout.",
    ),
    env_file: Path = typer.Option(
        Path(".env"),
        "--env-file",
        help="Dotenv file to load before resolving.",
    ),
    reveal_secrets: bool = typer.Option(
        False,
        "--reveal-secrets",
        help="Include credentials and API keys in clear text.",
    ),
) -> None:
    """Resolve network and verification config for every supported chain."""
    load_dotenv(env_file, override=False)
    try:
        settings = SlotwrightSettings()
    except ValidationError as e:
        err_console.print(f"[red]Invalid SLOTWRIGHT_* settings:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    try:
        config = build_deployment_config(
            default_registry(), environ_secret_source(), settings
        )
    except MissingCredentialError as e:
        err_console.print(f"[red]Cannot resolve configuration:[/red] {e}")
        raise typer.Exit(code=1)

    document = json.dumps(config.to_driver_dict(reveal_secrets=reveal_secrets), indent=2)

    if output is None:
        typer.echo(document)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(document + "\n", encoding="utf-8")
    console.print(
        f"[green]Wrote configuration for {len(config.chains)} chain(s) to[/green] {output}"
    )

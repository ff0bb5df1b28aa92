"""Slotwright CLI — Typer-based command-line interface.

Provides the ``slotwright`` command with subcommands for deriving storage
slots, listing supported chains, and resolving deployment configuration.

Tabular output uses Rich; values meant for scripting go to plain stdout.
"""

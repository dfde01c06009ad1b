"""modelkit-cli — Typer-based CLI for model schema snapshots."""

from modelkit_cli.cli import app

__all__ = ["app"]

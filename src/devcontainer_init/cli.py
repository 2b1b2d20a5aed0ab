"""Typer entry points for the devcontainer helpers."""

from __future__ import annotations

import typer

from . import diagnostics, dispatcher

init_app = typer.Typer(
    add_completion=False,
    help="Run the platform-specific devcontainer init script",
)
paths_app = typer.Typer(
    add_completion=False,
    help="Print path and environment details for devcontainer mounts",
)


@init_app.command()
def init() -> None:
    """Detect the host platform and run init.ps1 or init.sh."""
    raise typer.Exit(code=dispatcher.main())


@paths_app.command()
def paths() -> None:
    """Show how host paths map onto devcontainer mounts."""
    raise typer.Exit(code=diagnostics.main())

"""
swatchbook CLI package.

- palette.py: generate and swatch commands
- project.py: init command
"""

from __future__ import annotations

import logging
import platform
from typing import Annotated

import typer

from swatchbook._version import __version__

from .palette import generate, swatch
from .project import init

app = typer.Typer(
    help="Generate OKLCH tonal palettes and check their WCAG contrast",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"swatchbook {__version__}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logging on stderr")
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
) -> None:
    """Generate OKLCH tonal palettes and check their WCAG contrast."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="generate")(generate)
app.command(name="swatch")(swatch)
app.command(name="init")(init)


def main() -> None:
    app()


__all__ = ["app", "main", "version_callback"]

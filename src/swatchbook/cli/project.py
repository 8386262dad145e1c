"""
Project commands for the swatchbook CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from swatchbook.core.config_loader import config_exists, create_default_config, save_config

console = Console()


def init(
    project_dir: Annotated[
        Path,
        typer.Option("--project", "-p", help="Directory to write swatchbook.yaml into"),
    ] = Path("."),
    force: Annotated[
        bool, typer.Option("--force", help="Overwrite an existing swatchbook.yaml")
    ] = False,
) -> None:
    """Write a default swatchbook.yaml with primary and secondary seeds."""
    project_path = project_dir.resolve()
    if config_exists(project_path) and not force:
        console.print(
            f"[yellow]swatchbook.yaml already exists in {project_path} (use --force)[/yellow]"
        )
        raise typer.Exit(code=1)

    path = save_config(project_path, create_default_config())
    console.print(f"[green]Created {path}[/green]")

"""
Palette commands for the swatchbook CLI.

- generate: build the palette set and print CSS, JSON or swatch tables
- swatch: inspect a single color
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from swatchbook.core.config_loader import load_config
from swatchbook.core.contrast import evaluate_contrast
from swatchbook.core.conversion import to_canonical, to_css_notation, to_rgb
from swatchbook.core.errors import ConfigError, ParseFailure
from swatchbook.core.formatting import rgb_to_hex, rgb_to_hsl
from swatchbook.core.ir.config import SeedSpec
from swatchbook.core.ir.palette import Palette
from swatchbook.core.luminosity import step_for_luminosity
from swatchbook.core.palette_set import PaletteSet, build_palette_set
from swatchbook.core.swatches import Swatch, build_swatches

console = Console()

_OUTPUT_FORMATS = ("css", "json", "table")
_DEFAULT_SEED_NAMES = ("primary", "secondary")


def _seed_name(index: int) -> str:
    if index < len(_DEFAULT_SEED_NAMES):
        return _DEFAULT_SEED_NAMES[index]
    return f"color{index + 1}"


def _seeds_from_options(colors: list[str], names: list[str]) -> list[SeedSpec]:
    if len(names) > len(colors):
        console.print("[red]More --name options than --color options[/red]")
        raise typer.Exit(code=1)
    return [
        SeedSpec(name=names[i] if i < len(names) else _seed_name(i), color=color)
        for i, color in enumerate(colors)
    ]


def _palettes_to_json(palette_set: PaletteSet) -> str:
    return json.dumps(
        [palette.model_dump(mode="json") for palette in palette_set.all_palettes],
        indent=2,
    )


def _swatch_row(swatch: Swatch) -> list[Text | str]:
    label = Text(swatch.label, style=f"{swatch.text_color.value} on {swatch.hex}")
    if swatch.is_user_color:
        label.append(" *")
    contrast = swatch.contrast.summary() if swatch.contrast else "-"
    return [label, swatch.value, swatch.hex, swatch.hsl, swatch.text_color.value, contrast]


def _print_palette_table(palette: Palette) -> None:
    table = Table(title=f"{palette.name} ({palette.strategy.value})")
    table.add_column("Swatch")
    table.add_column("OKLCH")
    table.add_column("Hex")
    table.add_column("HSL")
    table.add_column("Text")
    table.add_column("WCAG2 contrast")

    for swatch in build_swatches(palette):
        table.add_row(*_swatch_row(swatch))

    console.print(table)


def generate(
    colors: Annotated[
        list[str] | None,
        typer.Option("--color", "-c", help="Seed color (repeatable); overrides swatchbook.yaml"),
    ] = None,
    names: Annotated[
        list[str] | None,
        typer.Option("--name", "-n", help="Palette name for the matching --color"),
    ] = None,
    project_dir: Annotated[
        Path,
        typer.Option("--project", "-p", help="Directory holding swatchbook.yaml"),
    ] = Path("."),
    no_global: Annotated[
        bool, typer.Option("--no-global", help="Skip the gray/red/green/orange/blue palettes")
    ] = False,
    output_format: Annotated[
        str, typer.Option("--format", "-f", help="Output format: css, json or table")
    ] = "css",
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output file (default: stdout)")
    ] = None,
) -> None:
    """
    Generate palettes and print them.

    Examples:
        swatchbook generate                          # seeds from swatchbook.yaml
        swatchbook generate -c "#7c3aed" -n brand    # one adaptive palette + globals
        swatchbook generate -f table --no-global     # swatch tables with contrast
    """
    fmt = output_format.lower()
    if fmt not in _OUTPUT_FORMATS:
        console.print(f"[red]Unknown format '{output_format}' (use css, json or table)[/red]")
        raise typer.Exit(code=1)
    if fmt == "table" and output:
        console.print("[red]--output is not supported with --format table[/red]")
        raise typer.Exit(code=1)

    try:
        config = load_config(project_dir.resolve())
    except ConfigError as e:
        console.print(f"[red]Error loading config: {e}[/red]")
        raise typer.Exit(code=1) from e

    seeds = _seeds_from_options(colors, names or []) if colors else config.seeds
    include_global = config.include_global and not no_global
    palette_set = build_palette_set(seeds, include_global=include_global)

    if fmt == "table":
        for palette in palette_set.all_palettes:
            _print_palette_table(palette)
        return

    content = palette_set.to_css() if fmt == "css" else _palettes_to_json(palette_set)
    if output:
        output.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Palettes written to {output}")
    else:
        typer.echo(content)


def swatch(
    color: Annotated[str, typer.Argument(help="Any CSS color: hex, name, rgb(), oklch()...")],
) -> None:
    """Show the OKLCH, hex and HSL notations of a color and its text contrast."""
    try:
        canonical = to_canonical(color)
    except ParseFailure as e:
        console.print(f"[red]Could not parse color '{color}': {e.message}[/red]")
        raise typer.Exit(code=1) from e

    rgb = to_rgb(canonical)
    table = Table(show_header=False)
    table.add_column("Property", style="bold")
    table.add_column("Value")
    table.add_row("OKLCH", to_css_notation(canonical))
    table.add_row("Step", step_for_luminosity(canonical.lightness_percent))

    if rgb is not None:
        report = evaluate_contrast(rgb)
        table.add_row("Hex", rgb_to_hex(rgb))
        table.add_row("HSL", rgb_to_hsl(rgb))
        table.add_row("Text", report.text_color.value)
        table.add_row("WCAG2 contrast", report.summary())

    console.print(table)

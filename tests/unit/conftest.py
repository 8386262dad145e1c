"""Shared fixtures for swatchbook unit tests."""

from __future__ import annotations

import pytest

from swatchbook.core.errors import ParseFailure
from swatchbook.core.renderer import ColorAideRenderer, Notation


class StubRenderer:
    """Deterministic ColorRenderer backed by lookup tables.

    Unknown inputs raise ParseFailure, like a renderer that cannot
    interpret them.
    """

    def __init__(
        self,
        oklch: dict[str, str] | None = None,
        rgb: dict[str, str] | None = None,
        raster: dict[str, tuple[int, int, int]] | None = None,
    ):
        self.oklch = oklch or {}
        self.rgb = rgb or {}
        self.raster = raster or {}
        self.calls: list[tuple[str, str]] = []

    def render(self, value: str, notation: Notation) -> str:
        self.calls.append((value, notation.value))
        table = self.oklch if notation is Notation.OKLCH else self.rgb
        if value not in table:
            raise ParseFailure(f"Unrecognized color {value!r}", value=value)
        return table[value]

    def rasterize(self, value: str) -> tuple[int, int, int]:
        self.calls.append((value, "raster"))
        if value not in self.raster:
            raise ParseFailure(f"Cannot paint {value!r}", value=value)
        return self.raster[value]


@pytest.fixture
def stub_renderer() -> StubRenderer:
    """An empty stub; tests fill in the tables they need."""
    return StubRenderer()


@pytest.fixture
def renderer() -> ColorAideRenderer:
    """The real coloraide-backed renderer."""
    return ColorAideRenderer()

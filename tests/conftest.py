"""Shared pytest fixtures for styletokens tests."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from styletokens.core.ir.styles import (
    Color,
    Effect,
    EffectStyle,
    FontName,
    Paint,
    PaintStyle,
    StyleSnapshot,
    TextStyle,
    Vector,
)
from styletokens.core.snapshot_loader import load_snapshot

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def snapshot_path(fixtures_dir: Path) -> Path:
    """Return path to the JSON snapshot covering every style kind."""
    return fixtures_dir / "snapshots" / "basic.json"


@pytest.fixture
def snapshot(snapshot_path: Path) -> StyleSnapshot:
    return load_snapshot(snapshot_path)


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2024-01-02T03:04:05.678Z."""
    return lambda: FIXED_NOW


@pytest.fixture
def blue_500() -> PaintStyle:
    """The canonical solid paint style: Blue 500, fully opaque."""
    return PaintStyle(
        id="S:blue",
        name="Blue 500",
        paints=[Paint(type="SOLID", color=Color(r=0.0975, g=0.4627, b=0.8235), opacity=1)],
    )


@pytest.fixture
def heading_style() -> TextStyle:
    return TextStyle(
        id="T:h1",
        name="Heading 1",
        font_size=32,
        font_name=FontName(family="Inter", style="Bold"),
    )


def _make_shadow(
    type: str = "DROP_SHADOW",
    *,
    x: float = 0,
    y: float = 4,
    radius: float = 8,
    spread: float | None = None,
    alpha: float | None = 0.25,
) -> Effect:
    """Build a shadow effect with a black color."""
    return Effect(
        type=type,
        color=Color(r=0, g=0, b=0, a=alpha),
        offset=Vector(x=x, y=y),
        radius=radius,
        spread=spread,
    )


def _make_effect_style(name: str, effects: list[Effect], id: str = "E:1") -> EffectStyle:
    return EffectStyle(id=id, name=name, effects=effects)


@pytest.fixture
def make_shadow():
    """Factory for black shadow effects."""
    return _make_shadow


@pytest.fixture
def make_effect_style():
    return _make_effect_style

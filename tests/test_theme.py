"""Palette helpers and the health bar color ramp."""

from __future__ import annotations

import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT / "src"))

from echoveil_ui.theme import (
    HP_CRITICAL,
    HP_HEALTHY,
    HP_WARNING,
    PALETTE,
    blend,
    hp_color,
    hp_ratio,
    rgba,
    to_rgb,
)


def test_stops_map_to_palette_colors() -> None:
    assert hp_color(1.0) == HP_HEALTHY == "#4ADE80"
    assert hp_color(0.5) == HP_WARNING == "#E8700A"
    assert hp_color(0.0) == HP_CRITICAL == "#CC2222"


def test_interpolates_between_adjacent_stops() -> None:
    assert hp_color(0.75) == "#99A745"
    assert hp_color(0.25) == "#DA4916"


def test_out_of_range_ratios_are_clamped() -> None:
    assert hp_color(1.7) == HP_HEALTHY
    assert hp_color(-0.3) == HP_CRITICAL


def test_hp_ratio_handles_edges() -> None:
    assert hp_ratio(22, 44) == 0.5
    assert hp_ratio(50, 45) == 1.0
    assert hp_ratio(-5, 45) == 0.0
    assert hp_ratio(3, 0) == 1.0


def test_blend_clamps_t() -> None:
    assert blend("#000000", "#FFFFFF", 2.0) == "#FFFFFF"
    assert blend("#000000", "#FFFFFF", -1.0) == "#000000"
    assert blend("#000000", "#646464", 0.5) == "#323232"


def test_rgba_and_parsing() -> None:
    assert to_rgb(PALETTE["hologram_blue"]) == (0, 212, 255)
    assert rgba("#FFFFFF", 0.0) == "rgba(255, 255, 255, 0)"
    assert rgba("#102030", 1.0) == "rgba(16, 32, 48, 255)"
    with pytest.raises(ValueError):
        to_rgb("#FFF")

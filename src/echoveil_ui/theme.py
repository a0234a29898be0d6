"""Color palette for the Echoveil companion UI."""

from __future__ import annotations

PALETTE = {
    "space_primary": "#0A0E1A",
    "space_card": "#111827",
    "hologram_blue": "#00D4FF",
    "holo_blue_subtle": "#1A3A4A",
    "tech_orange": "#E8700A",
    "sith_red": "#CC2222",
    "saber_green": "#4ADE80",
    "light_text": "#E2E8F0",
    "muted_text": "#6B7280",
    "border_subtle": "#1F2937",
}

BACKGROUND = PALETTE["space_primary"]
SURFACE = PALETTE["space_card"]
ACCENT = PALETTE["hologram_blue"]
TEXT_PRIMARY = PALETTE["light_text"]
TEXT_MUTED = PALETTE["muted_text"]
BORDER = PALETTE["border_subtle"]

HP_HEALTHY = PALETTE["saber_green"]
HP_WARNING = PALETTE["tech_orange"]
HP_CRITICAL = PALETTE["sith_red"]

FONT_FAMILY = "Segoe UI"
MONO_FAMILY = "Menlo"
FONT_SIZE = 11

RGB = tuple[int, int, int]


def to_rgb(hex_color: str) -> RGB:
    """Parse ``#RRGGBB`` into an RGB triple."""

    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #RRGGBB color, got {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def to_hex(rgb: RGB) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def rgba(hex_color: str, alpha: float) -> str:
    """Return a stylesheet ``rgba()`` expression for ``hex_color`` at ``alpha`` opacity."""

    red, green, blue = to_rgb(hex_color)
    return f"rgba({red}, {green}, {blue}, {round(alpha * 255)})"


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def blend(start: str, end: str, t: float) -> str:
    """Linearly interpolate between two palette colors; ``t`` is clamped to [0, 1]."""

    t = _clamp(t)
    mixed = tuple(
        round(a + (b - a) * t) for a, b in zip(to_rgb(start), to_rgb(end))
    )
    return to_hex(mixed)  # type: ignore[arg-type]


def hp_ratio(current: int, maximum: int) -> float:
    """Fraction of health remaining. A non-positive maximum reads as full health."""

    if maximum <= 0:
        return 1.0
    return _clamp(current / maximum)


def hp_color(ratio: float) -> str:
    """Map a health ratio onto critical (0.0), warning (0.5) and healthy (1.0)."""

    ratio = _clamp(ratio)
    if ratio >= 0.5:
        return blend(HP_WARNING, HP_HEALTHY, (ratio - 0.5) / 0.5)
    return blend(HP_CRITICAL, HP_WARNING, ratio / 0.5)


__all__ = [
    "PALETTE",
    "BACKGROUND",
    "SURFACE",
    "ACCENT",
    "TEXT_PRIMARY",
    "TEXT_MUTED",
    "BORDER",
    "FONT_FAMILY",
    "blend",
    "hp_color",
    "hp_ratio",
]

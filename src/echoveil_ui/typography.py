"""Font style presets."""

from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtGui import QFont

from .theme import FONT_FAMILY, MONO_FAMILY

_CSS_WEIGHTS = {
    QFont.Weight.Normal: 400,
    QFont.Weight.Medium: 500,
    QFont.Weight.DemiBold: 600,
    QFont.Weight.Bold: 700,
}


@dataclass(frozen=True)
class FontStyle:
    """A named text style: size, weight and digit treatment."""

    point_size: int
    weight: QFont.Weight = QFont.Weight.Normal
    monospaced: bool = False
    tabular_digits: bool = False
    letter_spacing: float = 0.0

    @property
    def family(self) -> str:
        return MONO_FAMILY if self.monospaced else FONT_FAMILY

    def to_qfont(self) -> QFont:
        font = QFont(self.family, self.point_size)
        font.setWeight(self.weight)
        if self.monospaced:
            font.setStyleHint(QFont.StyleHint.Monospace)
        if self.tabular_digits and hasattr(font, "setFeature"):
            # OpenType feature tags arrived in Qt 6.7.
            font.setFeature(QFont.Tag("tnum"), 1)
        if self.letter_spacing:
            font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, self.letter_spacing)
        return font

    def stylesheet(self) -> str:
        """Qt stylesheet declarations for this style."""

        parts = [
            f"font-family: '{self.family}';",
            f"font-size: {self.point_size}pt;",
            f"font-weight: {_CSS_WEIGHTS.get(self.weight, 400)};",
        ]
        if self.letter_spacing:
            parts.append(f"letter-spacing: {self.letter_spacing}px;")
        return " ".join(parts)


STAR_WARS_TITLE = FontStyle(28, QFont.Weight.Bold, letter_spacing=2.0)
HOLO_DISPLAY = FontStyle(13, QFont.Weight.DemiBold, tabular_digits=True)
DATA_READOUT = FontStyle(10, monospaced=True, tabular_digits=True)
BODY_TEXT = FontStyle(13)
LABEL_SMALL = FontStyle(9, QFont.Weight.Medium)

PRESETS = {
    "star_wars_title": STAR_WARS_TITLE,
    "holo_display": HOLO_DISPLAY,
    "data_readout": DATA_READOUT,
    "body_text": BODY_TEXT,
    "label_small": LABEL_SMALL,
}

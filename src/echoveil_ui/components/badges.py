"""Compact stat pills for ability scores."""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QWidget

from ..modifiers import apply_style
from ..theme import PALETTE, SURFACE, TEXT_MUTED, TEXT_PRIMARY, rgba
from ..typography import DATA_READOUT, LABEL_SMALL

STAT_COLORS = {
    "STR": PALETTE["saber_green"],
    "DEX": PALETTE["hologram_blue"],
    "CON": PALETTE["tech_orange"],
    "INT": PALETTE["sith_red"],
    "WIS": PALETTE["hologram_blue"],
    "CHA": PALETTE["tech_orange"],
}


def format_modifier(value: int, show_sign: bool = True) -> str:
    """Render ``3`` as ``+3`` and ``-1`` as ``-1``; zero never gets a sign."""

    if show_sign and value > 0:
        return f"+{value}"
    return str(value)


def stat_color(label: str) -> str:
    return STAT_COLORS.get(label.upper(), TEXT_PRIMARY)


class StatBadge(QFrame):
    """Label on the left, colored value on the right."""

    def __init__(
        self,
        label: str,
        value: int,
        show_modifier: bool = True,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.label = label
        self.value = value
        self.show_modifier = show_modifier
        self._build()

    @property
    def formatted_value(self) -> str:
        return format_modifier(self.value, self.show_modifier)

    @property
    def color(self) -> str:
        return stat_color(self.label)

    def _build(self) -> None:
        row = QHBoxLayout()
        row.setContentsMargins(12, 6, 12, 6)
        row.setSpacing(6)

        name = QLabel(self.label)
        name.setFont(LABEL_SMALL.to_qfont())
        name.setStyleSheet(f"color: {TEXT_MUTED}; border: none;")

        value = QLabel(self.formatted_value)
        font = DATA_READOUT.to_qfont()
        font.setBold(True)
        value.setFont(font)
        value.setStyleSheet(f"color: {self.color}; border: none;")

        row.addWidget(name)
        row.addStretch()
        row.addWidget(value)
        self.setLayout(row)

        apply_style(
            self,
            "badge",
            f"background-color: {rgba(SURFACE, 0.7)}; "
            f"border: 1px solid {rgba(self.color, 0.3)}; border-radius: 8px;",
        )
        self.name_label = name
        self.value_label = value

"""Component gallery for the Echoveil design system."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from .components import ActionButton, DiceRollOverlay, HPBar, HologramCard, SectionHeader, StatBadge
from .modifiers import data_readout, glow_effect, holo_background, holo_card, muted_text, safe_area_padding, stagger_reveal
from .qt_timers import on_timer
from .scheduling import UiScheduler
from .theme import ACCENT, BACKGROUND, BORDER, FONT_FAMILY, FONT_SIZE, PALETTE, SURFACE, TEXT_PRIMARY
from .typography import PRESETS

PULSE_SECONDS = 2.0


def configure_palette(app: QApplication) -> None:
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(BACKGROUND))
    palette.setColor(QPalette.ColorRole.Base, QColor(SURFACE))
    palette.setColor(QPalette.ColorRole.AlternateBase, QColor(PALETTE["holo_blue_subtle"]))
    palette.setColor(QPalette.ColorRole.Text, QColor(TEXT_PRIMARY))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(TEXT_PRIMARY))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(TEXT_PRIMARY))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(ACCENT))
    palette.setColor(QPalette.ColorRole.HighlightedText, QColor(BACKGROUND))
    app.setPalette(palette)

    app.setStyleSheet(
        f"""
        QWidget {{
            color: {TEXT_PRIMARY};
            font-family: '{FONT_FAMILY}';
            font-size: {FONT_SIZE}pt;
        }}
        QScrollArea, QScrollArea > QWidget > QWidget {{
            background-color: {BACKGROUND};
            border: none;
        }}
        QProgressBar {{
            background-color: {SURFACE};
            border: 1px solid {BORDER};
            border-radius: 4px;
        }}
        QProgressBar::chunk {{
            background-color: {ACCENT};
        }}
        """
    )


def _swatch(name: str, color: str) -> QWidget:
    row = QWidget()
    layout = QHBoxLayout()
    layout.setContentsMargins(0, 0, 0, 0)
    layout.setSpacing(12)
    chip = QFrame()
    chip.setFixedSize(36, 36)
    chip.setStyleSheet(
        f"background-color: {color}; border: 1px solid rgba(255, 255, 255, 51); border-radius: 6px;"
    )
    label = data_readout(QLabel(f"{name}  {color}"))
    layout.addWidget(chip)
    layout.addWidget(label)
    layout.addStretch()
    row.setLayout(layout)
    return row


class ComponentGallery(QWidget):
    """Scrollable showcase of palette, typography and components."""

    def __init__(self, scheduler: Optional[UiScheduler] = None) -> None:
        super().__init__()
        self.scheduler = scheduler
        self.setWindowTitle("Echoveil Design System")
        self.setMinimumSize(520, 720)
        self.pulse_count = 0
        self.rolls_opened = 0
        self._build()
        self.pulse = on_timer(
            self.status_label, PULSE_SECONDS, self._on_pulse, repeats=True, scheduler=scheduler
        )

    def _build(self) -> None:
        content = QWidget()
        column = QVBoxLayout()
        column.setSpacing(16)

        title = QLabel("Echoveil")
        title.setFont(PRESETS["star_wars_title"].to_qfont())
        column.addWidget(title)

        status = muted_text(QLabel("Waiting for first pulse…"))
        column.addWidget(status)
        self.status_label = status

        column.addWidget(SectionHeader("Palette"))
        for name, color in PALETTE.items():
            column.addWidget(_swatch(name, color))

        column.addWidget(SectionHeader("Typography"))
        for name, style in PRESETS.items():
            sample = QLabel(name.replace("_", " ").title())
            sample.setFont(style.to_qfont())
            column.addWidget(sample)

        column.addWidget(SectionHeader("Character vitals"))
        cards = [
            HologramCard("Strength +3, Dexterity +2, Constitution +4", title="Character Stats"),
            HologramCard("Level 5 Tidecaller\nCurrent HP: 38/40\nAC: 18\nInitiative: +2"),
        ]
        for index, card in enumerate(cards):
            column.addWidget(stagger_reveal(card, index, scheduler=self.scheduler))
        self.cards = cards

        self.hp_bars = [HPBar(45, 45), HPBar(22, 45), HPBar(8, 45)]
        for bar in self.hp_bars:
            column.addWidget(bar)

        column.addWidget(SectionHeader("Ability scores"))
        grid = QGridLayout()
        for position, (label, value) in enumerate(
            [("STR", 3), ("DEX", 2), ("CON", 4), ("INT", -1), ("WIS", 0), ("CHA", 1)]
        ):
            grid.addWidget(StatBadge(label, value), position // 3, position % 3)
        column.addLayout(grid)

        column.addWidget(SectionHeader("Actions"))
        roll_button = ActionButton("Roll d20", self._open_roll, icon="🎲", scheduler=self.scheduler)
        column.addWidget(glow_effect(roll_button, radius=12))
        column.addWidget(ActionButton("Loading...", lambda: None, loading=True, scheduler=self.scheduler))
        self.roll_button = roll_button

        readout = data_readout(holo_card(QLabel("16 + 3 (DEX) = 19")))
        column.addWidget(safe_area_padding(readout))
        column.addStretch()

        content.setLayout(column)
        holo_background(safe_area_padding(content))

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(content)
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(scroll)
        self.setLayout(layout)

    def _on_pulse(self) -> None:
        self.pulse_count += 1
        self.status_label.setText(f"Hologram link pulse #{self.pulse_count}")

    def _open_roll(self) -> None:
        self.rolls_opened += 1
        overlay = DiceRollOverlay(20, [18], 4, 22, scheduler=self.scheduler, parent=self)
        overlay.open()


def build_window() -> QWidget:
    return ComponentGallery()


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    configure_palette(app)
    window = build_window()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

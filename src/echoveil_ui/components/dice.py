"""Full-window dice roll result overlay."""
from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QMouseEvent
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ..qt_timers import on_timer
from ..scheduling import UiScheduler
from ..theme import BACKGROUND, PALETTE, SURFACE, TEXT_MUTED, TEXT_PRIMARY, rgba
from ..typography import DATA_READOUT, MONO_FAMILY
from .badges import format_modifier

REVEAL_DELAY_SECONDS = 0.1
HIGH_ROLL = 15
LOW_ROLL = 8


def _mono(point_size: int, weight: QFont.Weight) -> QFont:
    font = QFont(MONO_FAMILY, point_size)
    font.setWeight(weight)
    font.setStyleHint(QFont.StyleHint.Monospace)
    return font


class DiceRollOverlay(QDialog):
    """Shows a busy indicator, then the total, individual dice and modifier."""

    def __init__(
        self,
        sides: int,
        rolls: Sequence[int],
        modifier: int,
        total: int,
        scheduler: Optional[UiScheduler] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        if sides < 1:
            raise ValueError("A die needs at least one side.")
        if not rolls:
            raise ValueError("Provide at least one rolled value.")
        self.sides = sides
        self.rolls = list(rolls)
        self.modifier = modifier
        self.total = total
        self.result_visible = False
        self.setWindowTitle("Roll result")
        self.setStyleSheet(f"QDialog {{ background-color: {BACKGROUND}; }}")
        self._build()
        self.reveal = on_timer(self, REVEAL_DELAY_SECONDS, self.show_result, scheduler=scheduler)

    @property
    def is_crit(self) -> bool:
        return self.sides == 20 and 20 in self.rolls

    @property
    def is_fail(self) -> bool:
        return self.sides == 20 and 1 in self.rolls

    @property
    def result_color(self) -> str:
        if self.is_crit:
            return PALETTE["tech_orange"]
        if self.is_fail:
            return PALETTE["sith_red"]
        if self.total >= HIGH_ROLL:
            return PALETTE["hologram_blue"]
        if self.total <= LOW_ROLL:
            return PALETTE["tech_orange"]
        return TEXT_PRIMARY

    def _build(self) -> None:
        layout = QVBoxLayout()
        layout.setSpacing(32)
        layout.addStretch()

        busy = QProgressBar()
        busy.setRange(0, 0)
        busy.setTextVisible(False)
        busy.setFixedWidth(160)

        total_label = QLabel(str(self.total))
        total_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        total_label.setFont(_mono(72, QFont.Weight.Bold))
        total_label.setStyleSheet(f"color: {self.result_color};")

        dice_row = QHBoxLayout()
        dice_row.setSpacing(4)
        dice_row.addStretch()
        self.roll_labels: list[QLabel] = []
        for roll in self.rolls:
            chip = QLabel(str(roll))
            chip.setFont(_mono(28, QFont.Weight.DemiBold))
            chip.setStyleSheet(
                f"color: {TEXT_PRIMARY}; background-color: {SURFACE}; "
                "padding: 4px 8px; border-radius: 6px;"
            )
            dice_row.addWidget(chip)
            self.roll_labels.append(chip)
        self.modifier_label: Optional[QLabel] = None
        if self.modifier != 0:
            chip = QLabel(format_modifier(self.modifier))
            chip.setFont(_mono(28, QFont.Weight.DemiBold))
            chip.setStyleSheet(
                f"color: {PALETTE['tech_orange']}; "
                f"background-color: {rgba(PALETTE['tech_orange'], 0.15)}; "
                "padding: 4px 8px; border-radius: 6px;"
            )
            dice_row.addWidget(chip)
            self.modifier_label = chip
        dice_row.addStretch()

        caption = QLabel("TOTAL")
        caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        caption.setFont(DATA_READOUT.to_qfont())
        caption.setStyleSheet(f"color: {TEXT_MUTED};")

        result = QWidget()
        result_layout = QVBoxLayout()
        result_layout.addWidget(total_label)
        result_layout.addLayout(dice_row)
        result_layout.addWidget(caption)
        result.setLayout(result_layout)
        result.hide()

        close_button = QPushButton("Tap to close")
        close_button.setFont(DATA_READOUT.to_qfont())
        close_button.setStyleSheet(
            f"color: {TEXT_MUTED}; background-color: {rgba(SURFACE, 0.5)}; "
            "padding: 16px; border-radius: 8px;"
        )
        close_button.clicked.connect(self.accept)

        layout.addWidget(busy, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(result)
        layout.addStretch()
        layout.addWidget(close_button, alignment=Qt.AlignmentFlag.AlignCenter)
        self.setLayout(layout)

        self.busy_indicator = busy
        self.result_panel = result
        self.total_label = total_label
        self.close_button = close_button

    def show_result(self) -> None:
        self.result_visible = True
        self.busy_indicator.hide()
        self.result_panel.show()

    def mousePressEvent(self, event: QMouseEvent) -> None:  # noqa: N802 - Qt override
        self.accept()
        super().mousePressEvent(event)

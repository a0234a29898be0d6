"""Health point bar with a green-to-red fill."""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from ..theme import BORDER, TEXT_MUTED, TEXT_PRIMARY, hp_color, hp_ratio
from ..typography import DATA_READOUT, LABEL_SMALL

DEFAULT_BAR_HEIGHT = 8
TRACK_RADIUS = 4


class _HPTrack(QWidget):
    def __init__(self, bar_height: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.ratio = 1.0
        self.fill_color = hp_color(1.0)
        self.setFixedHeight(bar_height)

    def paintEvent(self, event: QPaintEvent) -> None:  # noqa: N802 - Qt override
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)
        track = QRectF(self.rect())
        painter.setBrush(QColor(BORDER))
        painter.drawRoundedRect(track, TRACK_RADIUS, TRACK_RADIUS)
        if self.ratio > 0:
            fill = QRectF(track.x(), track.y(), track.width() * self.ratio, track.height())
            painter.setBrush(QColor(self.fill_color))
            painter.drawRoundedRect(fill, TRACK_RADIUS, TRACK_RADIUS)
        painter.end()


class HPBar(QWidget):
    """``HP  current/maximum`` readout over a colored fill track."""

    def __init__(
        self,
        current: int,
        maximum: int,
        bar_height: int = DEFAULT_BAR_HEIGHT,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        header = QHBoxLayout()
        caption = QLabel("HP")
        caption.setFont(LABEL_SMALL.to_qfont())
        caption.setStyleSheet(f"color: {TEXT_MUTED};")
        readout = QLabel()
        font = DATA_READOUT.to_qfont()
        font.setBold(True)
        readout.setFont(font)
        readout.setStyleSheet(f"color: {TEXT_PRIMARY};")
        header.addWidget(caption)
        header.addStretch()
        header.addWidget(readout)

        self.track = _HPTrack(bar_height)
        layout.addLayout(header)
        layout.addWidget(self.track)
        self.setLayout(layout)

        self.readout_label = readout
        self.set_values(current, maximum)

    @property
    def ratio(self) -> float:
        return self.track.ratio

    @property
    def fill_color(self) -> str:
        return self.track.fill_color

    def set_values(self, current: int, maximum: int) -> None:
        self.current = current
        self.maximum = maximum
        self.track.ratio = hp_ratio(current, maximum)
        self.track.fill_color = hp_color(self.track.ratio)
        self.readout_label.setText(f"{current}/{maximum}")
        self.track.update()

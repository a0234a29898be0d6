"""Card and header building blocks."""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from ..modifiers import apply_style, glow_effect, holo_card
from ..theme import ACCENT, BORDER, TEXT_PRIMARY
from ..typography import BODY_TEXT, HOLO_DISPLAY


class HologramCard(QFrame):
    """Dark card with a hologram-blue title that lights up on hover."""

    def __init__(
        self,
        content: str,
        title: Optional[str] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("card")
        self.hovered = False
        self._build(content, title)
        self._apply_hover_style()

    def _build(self, content: str, title: Optional[str]) -> None:
        layout = QVBoxLayout()
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        self.title_label: Optional[QLabel] = None
        if title:
            title_label = QLabel(title)
            title_label.setFont(HOLO_DISPLAY.to_qfont())
            title_label.setStyleSheet(f"color: {ACCENT}; border: none;")
            layout.addWidget(title_label)
            self.title_label = title_label

        content_label = QLabel(content)
        content_label.setWordWrap(True)
        content_label.setFont(BODY_TEXT.to_qfont())
        content_label.setStyleSheet(f"color: {TEXT_PRIMARY}; border: none;")
        layout.addWidget(content_label)
        self.content_label = content_label

        self.setLayout(layout)
        holo_card(self)

    def enterEvent(self, event: QEvent) -> None:  # noqa: N802 - Qt override
        self.set_hovered(True)
        super().enterEvent(event)

    def leaveEvent(self, event: QEvent) -> None:  # noqa: N802 - Qt override
        self.set_hovered(False)
        super().leaveEvent(event)

    def set_hovered(self, hovered: bool) -> None:
        if hovered == self.hovered:
            return
        self.hovered = hovered
        self._apply_hover_style()

    def _apply_hover_style(self) -> None:
        if self.hovered:
            apply_style(self, "hover", f"border: 2px solid {ACCENT};")
            glow_effect(self, ACCENT, radius=8)
        else:
            apply_style(self, "hover", f"border: 1px solid {BORDER};")
            glow_effect(self, "#000000", radius=4)


class SectionHeader(QWidget):
    """Upper-cased section title with an accent bar and a divider underneath."""

    def __init__(self, title: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)

        row = QHBoxLayout()
        row.setSpacing(12)
        accent = QFrame()
        accent.setFixedSize(4, 20)
        accent.setStyleSheet(f"background-color: {ACCENT}; border-radius: 2px;")

        label = QLabel(title.upper())
        font = HOLO_DISPLAY.to_qfont()
        font.setLetterSpacing(QFont.SpacingType.AbsoluteSpacing, 1.5)
        label.setFont(font)
        label.setStyleSheet(f"color: {TEXT_PRIMARY};")
        row.addWidget(accent)
        row.addWidget(label)
        row.addStretch()

        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setStyleSheet(f"color: {BORDER}; background-color: {BORDER};")
        divider.setFixedHeight(1)

        layout.addLayout(row)
        layout.addWidget(divider)
        self.setLayout(layout)

        self.title_label = label
        self.accent_bar = accent

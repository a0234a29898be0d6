"""Holographic action button."""
from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtWidgets import QPushButton, QWidget

from ..modifiers import apply_style
from ..qt_timers import QtScheduler
from ..scheduling import DelayedActionScheduler, UiScheduler
from ..theme import ACCENT, BORDER, SURFACE, TEXT_PRIMARY
from ..typography import HOLO_DISPLAY

PRESS_RESET_SECONDS = 0.15


class ActionButton(QPushButton):
    """Dark button that flashes its accent border for a moment when pressed."""

    def __init__(
        self,
        title: str,
        action: Callable[[], None],
        icon: Optional[str] = None,
        loading: bool = False,
        scheduler: Optional[UiScheduler] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.title = title
        self.icon_text = icon
        self.action = action
        self.pressed_highlight = False
        self.loading = False
        self._delays = DelayedActionScheduler(scheduler or QtScheduler(self))
        self.setFont(HOLO_DISPLAY.to_qfont())
        self.clicked.connect(self._handle_click)
        self.set_loading(loading)
        self._apply_style()

    def set_loading(self, loading: bool) -> None:
        self.loading = loading
        self.setEnabled(not loading)
        if loading:
            self.setText("Loading…")
        elif self.icon_text:
            self.setText(f"{self.icon_text}  {self.title}")
        else:
            self.setText(self.title)

    def _handle_click(self) -> None:
        self.pressed_highlight = True
        self._apply_style()
        self._delays.schedule_once(PRESS_RESET_SECONDS, self._release_highlight)
        if not self.loading:
            self.action()

    def _release_highlight(self) -> None:
        self.pressed_highlight = False
        self._apply_style()

    def _apply_style(self) -> None:
        color = ACCENT if self.pressed_highlight else TEXT_PRIMARY
        border = ACCENT if self.pressed_highlight else BORDER
        width = 2 if self.pressed_highlight else 1
        horizontal = 16 if self.icon_text else 20
        apply_style(
            self,
            "button",
            f"background-color: {SURFACE}; color: {color}; "
            f"border: {width}px solid {border}; border-radius: 8px; "
            f"padding: 14px {horizontal}px;",
        )

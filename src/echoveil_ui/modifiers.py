"""Declarative styling helpers that decorate an existing widget.

Each modifier returns the widget it was given, so calls can be chained::

    glow_effect(holo_card(panel), radius=12)

Stylesheet declarations are kept per modifier and recomposed on every call,
so several modifiers can share one widget. Where two modifiers set the same
property, the one applied last wins.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QWidget

from .qt_timers import QtScheduler
from .scheduling import DelayedActionScheduler, UiScheduler
from .theme import ACCENT, BORDER, PALETTE, SURFACE, TEXT_MUTED, TEXT_PRIMARY, rgba
from .typography import DATA_READOUT

W = TypeVar("W", bound=QWidget)

_STYLES_ATTR = "_echoveil_styles"

CARD_RADIUS = 12
SAFE_AREA_HORIZONTAL = 16
SAFE_AREA_VERTICAL = 12


def _selector(widget: QWidget) -> str:
    if not widget.objectName():
        widget.setObjectName(f"echoveil_{id(widget):x}")
    return f"#{widget.objectName()}"


def apply_style(widget: W, key: str, declarations: str) -> W:
    """Store ``declarations`` under ``key`` and rebuild the widget's stylesheet."""

    styles: dict[str, str] = getattr(widget, _STYLES_ATTR, None) or {}
    # Re-inserted at the end so the latest modifier comes last in the rule.
    styles.pop(key, None)
    styles[key] = declarations
    setattr(widget, _STYLES_ATTR, styles)
    body = " ".join(styles.values())
    widget.setStyleSheet(f"{_selector(widget)} {{ {body} }}")
    return widget


def holo_card(widget: W) -> W:
    """Card surface with rounded corners and a subtle border."""

    return apply_style(
        widget,
        "card",
        f"background-color: {SURFACE}; border: 1px solid {BORDER}; "
        f"border-radius: {CARD_RADIUS}px;",
    )


def glow_effect(
    widget: W,
    color: str = ACCENT,
    radius: float = 8,
    x_offset: float = 0,
    y_offset: float = 4,
) -> W:
    """Colored drop shadow at 30% opacity."""

    glow = QColor(color)
    glow.setAlphaF(0.3)
    effect = QGraphicsDropShadowEffect(widget)
    effect.setColor(glow)
    effect.setBlurRadius(radius)
    effect.setOffset(x_offset, y_offset)
    widget.setGraphicsEffect(effect)
    return widget


def hologram_border(widget: W, active: bool = True, width: int = 12, corner_radius: int = 8) -> W:
    color = ACCENT if active else BORDER
    return apply_style(
        widget,
        "border",
        f"border: {width}px solid {color}; border-radius: {corner_radius}px;",
    )


def data_readout(widget: W) -> W:
    return apply_style(widget, "readout", f"{DATA_READOUT.stylesheet()} color: {TEXT_PRIMARY};")


def muted_text(widget: W) -> W:
    return apply_style(widget, "muted", f"color: {TEXT_MUTED};")


def holo_background(widget: W) -> W:
    """Diagonal gradient from the card surface into a faint hologram tint."""

    tint = rgba(PALETTE["holo_blue_subtle"], 0.3)
    return apply_style(
        widget,
        "background",
        "background: qlineargradient(x1: 0, y1: 0, x2: 1, y2: 1, "
        f"stop: 0 {SURFACE}, stop: 1 {tint});",
    )


def safe_area_padding(widget: W) -> W:
    widget.setContentsMargins(
        SAFE_AREA_HORIZONTAL, SAFE_AREA_VERTICAL, SAFE_AREA_HORIZONTAL, SAFE_AREA_VERTICAL
    )
    return widget


def stagger_reveal(
    widget: W,
    index: int,
    base_delay: float = 0.1,
    scheduler: Optional[UiScheduler] = None,
) -> W:
    """Reveal list items one after another, ``base_delay`` seconds apart.

    The first item shows immediately; later items stay hidden until their turn.
    """

    if index <= 0:
        return widget
    if scheduler is None:
        scheduler = QtScheduler(widget)
    widget.hide()
    DelayedActionScheduler(scheduler).schedule_once(index * base_delay, widget.show)
    return widget

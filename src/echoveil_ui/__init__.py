"""Echoveil design system: palette, typography, components and delayed UI actions."""

from .scheduling import (
    DelayedActionScheduler,
    ManualScheduler,
    TimerAttachment,
    TimerHandle,
    TimerSlot,
    UiScheduler,
)
from .theme import PALETTE, blend, hp_color, hp_ratio

__all__ = [
    "DelayedActionScheduler",
    "ManualScheduler",
    "PALETTE",
    "TimerAttachment",
    "TimerHandle",
    "TimerSlot",
    "UiScheduler",
    "blend",
    "hp_color",
    "hp_ratio",
]

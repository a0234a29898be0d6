"""Reusable UI components for the Echoveil companion app."""

from .badges import StatBadge, format_modifier
from .buttons import ActionButton
from .cards import HologramCard, SectionHeader
from .dice import DiceRollOverlay
from .hp_bar import HPBar

__all__ = [
    "ActionButton",
    "DiceRollOverlay",
    "HPBar",
    "HologramCard",
    "SectionHeader",
    "StatBadge",
    "format_modifier",
]

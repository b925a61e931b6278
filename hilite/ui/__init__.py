"""Overlay chrome, layout and key handling around the core."""

from hilite.ui.dialog import Dialog
from hilite.ui.keys import KeyAction, classify_key, matches_key
from hilite.ui.layout import Margin, Rect, centered_area, outer_rect

__all__ = [
    "Dialog",
    "KeyAction",
    "Margin",
    "Rect",
    "centered_area",
    "classify_key",
    "matches_key",
    "outer_rect",
]

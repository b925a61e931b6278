"""Data models for styled fragments and render options."""

from hilite.models.fragment import Fragment, MatchRange
from hilite.models.options import HighlightOptions, TruncateOptions

__all__ = [
    "Fragment",
    "HighlightOptions",
    "MatchRange",
    "TruncateOptions",
]

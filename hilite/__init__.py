"""Highlighted, width-truncated rich text for terminal UIs."""

from hilite.core import (
    compose_styles,
    display_width,
    highlight,
    highlight_text,
    merge_ranges,
    truncate_by_width,
    truncate_to_width,
)
from hilite.models import Fragment, HighlightOptions, MatchRange, TruncateOptions

__version__ = "0.1.0"

__all__ = [
    "Fragment",
    "HighlightOptions",
    "MatchRange",
    "TruncateOptions",
    "compose_styles",
    "display_width",
    "highlight",
    "highlight_text",
    "merge_ranges",
    "truncate_by_width",
    "truncate_to_width",
]

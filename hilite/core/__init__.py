"""Core functionality module."""

from hilite.core.cells import display_width, saturating_sub, truncate_to_width
from hilite.core.constants import FormattingConstants
from hilite.core.highlighting import (
    fragments_to_text,
    highlight,
    highlight_text,
    highlight_with,
    render_fragments,
)
from hilite.core.ranges import flatten_ranges, merge_ranges, single_range, validate_ranges
from hilite.core.search import fuzzy_indices, subsequence_indices
from hilite.core.styles import compose_styles, parse_style
from hilite.core.truncation import truncate_by_width, truncate_with

__all__ = [
    "FormattingConstants",
    "compose_styles",
    "display_width",
    "flatten_ranges",
    "fragments_to_text",
    "fuzzy_indices",
    "highlight",
    "highlight_text",
    "highlight_with",
    "merge_ranges",
    "parse_style",
    "render_fragments",
    "saturating_sub",
    "single_range",
    "subsequence_indices",
    "truncate_by_width",
    "truncate_to_width",
    "truncate_with",
    "validate_ranges",
]

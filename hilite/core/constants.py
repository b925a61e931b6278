"""
Constants and default values for hilite.
"""

from enum import IntEnum, StrEnum


class StyleDefaults(StrEnum):
    """Default rich style definitions."""

    MATCHED = "bold yellow"
    UNMATCHED = ""
    ELLIPSIS = "dim"


class TextDefaults(StrEnum):
    """Default marker strings."""

    ELLIPSIS = "..."


class SearchConstants(IntEnum):
    """Fuzzy search limits."""

    DEFAULT_THRESHOLD = 70
    MIN_THRESHOLD = 0
    MAX_THRESHOLD = 100


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2

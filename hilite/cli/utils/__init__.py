"""CLI utilities module."""

from hilite.cli.utils.options import (
    ELLIPSIS_OPTION,
    OUTPUT_FORMAT_OPTION,
    VERBOSE_OPTION,
    WIDTH_OPTION,
    MatchMode,
    OutputFormat,
)
from hilite.cli.utils.output import handle_json_output, handle_text_output

__all__ = [
    "ELLIPSIS_OPTION",
    "OUTPUT_FORMAT_OPTION",
    "VERBOSE_OPTION",
    "WIDTH_OPTION",
    "MatchMode",
    "OutputFormat",
    "handle_json_output",
    "handle_text_output",
]

"""Shared CLI options and enums for commands."""

from enum import StrEnum
from typing import Annotated

import typer


class OutputFormat(StrEnum):
    """Supported output formats across commands."""

    TEXT = "text"
    JSON = "json"


class MatchMode(StrEnum):
    """How a search query is turned into matched positions."""

    SUBSEQUENCE = "subsequence"
    FUZZY = "fuzzy"


OUTPUT_FORMAT_OPTION = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
]

WIDTH_OPTION = Annotated[
    int | None,
    typer.Option(
        "--width",
        "-w",
        min=0,
        help="Display column budget (auto-detected from HILITE_MAX_WIDTH env var)",
    ),
]

ELLIPSIS_OPTION = Annotated[
    str | None,
    typer.Option(
        "--ellipsis",
        "-e",
        help="Marker appended when content is cut (defaults to HILITE_ELLIPSIS)",
    ),
]

VERBOSE_OPTION = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
]

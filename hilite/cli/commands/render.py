"""Render command implementation."""

import logging
from typing import Annotated

import typer
from rich.console import Console

from hilite.cli.utils.options import (
    ELLIPSIS_OPTION,
    OUTPUT_FORMAT_OPTION,
    WIDTH_OPTION,
    MatchMode,
    OutputFormat,
)
from hilite.cli.utils.output import handle_json_output, handle_text_output
from hilite.config import load_config
from hilite.core.highlighting import fragments_to_text, render_fragments
from hilite.core.ranges import merge_ranges
from hilite.core.search import fuzzy_indices, subsequence_indices
from hilite.core.styles import parse_style
from hilite.exceptions import HiliteError
from hilite.models import Fragment
from hilite.ui.dialog import Dialog
from hilite.ui.layout import Margin

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _query_indices(query: str, text: str, mode: MatchMode, threshold: int) -> list[int]:
    if mode == MatchMode.FUZZY:
        indices = fuzzy_indices(query, text, threshold)
    else:
        indices = subsequence_indices(query, text)
    if indices is None:
        logger.debug(f"Query {query!r} did not match")
        return []
    return indices


def render_text(
    text: Annotated[str, typer.Argument(help="Text to render")],
    match: Annotated[
        list[int] | None,
        typer.Option(
            "--match",
            "-m",
            help="Matched character position (repeatable)",
        ),
    ] = None,
    query: Annotated[
        str | None,
        typer.Option(
            "--query",
            "-q",
            help="Search query used to derive matched positions",
        ),
    ] = None,
    mode: Annotated[
        MatchMode,
        typer.Option(
            "--mode",
            help="How the query is matched against the text",
            case_sensitive=False,
        ),
    ] = MatchMode.SUBSEQUENCE,
    width: WIDTH_OPTION = None,
    ellipsis: ELLIPSIS_OPTION = None,
    background: Annotated[
        str | None,
        typer.Option(
            "--background",
            "-b",
            help="Show the result in a dialog with this background color",
        ),
    ] = None,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TEXT,
) -> None:
    """Highlight matched positions in TEXT and fit it to a column budget.

    Positions come from --match or are derived from --query. With --width the
    text is cut to that many columns and ends with the ellipsis marker.
    """
    try:
        config = load_config()
        if ellipsis is not None:
            config = config.model_copy(update={"ellipsis": ellipsis})

        indices = list(match or [])
        if query:
            indices.extend(_query_indices(query, text, mode, config.search_threshold))

        fragments = render_fragments(
            [Fragment(text=text)],
            merge_ranges(indices),
            config.highlight_options(),
            config.truncate_options(width),
        )
        background_style = parse_style(f"on {background}") if background else None
    except HiliteError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e

    if output_format == OutputFormat.JSON:
        handle_json_output(fragments, lambda items: [f.to_dict() for f in items])
        return

    rendered = fragments_to_text(fragments)
    if background_style is not None:
        handle_text_output(Dialog(rendered, Margin(horizontal=1), background_style))
    else:
        handle_text_output(rendered)

"""Ranges command implementation."""

from typing import Annotated

import typer
from rich.table import Table

from hilite.cli.utils.options import OUTPUT_FORMAT_OPTION, OutputFormat
from hilite.cli.utils.output import handle_json_output, handle_text_output
from hilite.core.ranges import merge_ranges


def show_ranges(
    indices: Annotated[list[int], typer.Argument(help="Matched positions, in any order")],
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TEXT,
) -> None:
    """Merge matched positions into half-open ranges."""
    ranges = merge_ranges(indices)

    if output_format == OutputFormat.JSON:
        handle_json_output(ranges, lambda items: [[r.start, r.end] for r in items])
        return

    table = Table(title="Match Ranges")
    table.add_column("Start", justify="right", style="cyan")
    table.add_column("End", justify="right", style="cyan")
    table.add_column("Length", justify="right", style="dim")
    for r in ranges:
        table.add_row(str(r.start), str(r.end), str(len(r)))
    handle_text_output(table)

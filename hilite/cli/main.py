"""Main CLI entry point for hilite."""

import logging

import typer
from rich.logging import RichHandler

from hilite.cli.commands.ranges import show_ranges
from hilite.cli.commands.render import render_text
from hilite.cli.utils.options import VERBOSE_OPTION

app = typer.Typer(
    name="hilite",
    help="hilite - Highlight matches and truncate styled text for terminal UIs",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    hilite CLI
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(show_path=False)])


app.command("render", help="Highlight matched positions and fit text to a width")(render_text)
app.command("ranges", help="Merge matched positions into ranges")(show_ranges)


if __name__ == "__main__":
    app()

"""Overlay dialog that paints content over a cleared background."""

from collections.abc import Sequence

from rich.console import Console, ConsoleOptions, RenderableType, RenderResult
from rich.measure import Measurement
from rich.padding import Padding
from rich.style import Style

from hilite.core.highlighting import fragments_to_text
from hilite.models import Fragment
from hilite.ui.layout import Margin


class Dialog:
    """Wraps a renderable with a background filled margin.

    The margin area is painted with the background style so anything drawn
    underneath is hidden.
    """

    def __init__(
        self,
        content: RenderableType | Sequence[Fragment],
        margin: Margin | None = None,
        background: Style | str | None = None,
    ) -> None:
        if isinstance(content, list | tuple):
            content = fragments_to_text(content)
        self.content = content
        self.margin = margin or Margin()
        self.background = background

    @property
    def style(self) -> Style:
        if isinstance(self.background, Style):
            return self.background
        return Style(bgcolor=self.background) if self.background else Style.null()

    def _padded(self) -> Padding:
        return Padding(
            self.content,
            (self.margin.vertical, self.margin.horizontal),
            style=self.style,
            expand=False,
        )

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield self._padded()

    def __rich_measure__(self, console: Console, options: ConsoleOptions) -> Measurement:
        return Measurement.get(console, options, self._padded())

"""Width-bounded truncation of styled fragments."""

import logging
from collections.abc import Callable, Iterable

from rich.style import Style

from hilite.core.cells import display_width, truncate_to_width
from hilite.models import Fragment, TruncateOptions

logger = logging.getLogger(__name__)


def truncate_by_width(
    fragments: Iterable[Fragment],
    max_width: int,
    ellipsis: str = "",
    ellipsis_style: Style | None = None,
    *,
    measure: Callable[[str], int] = display_width,
    truncate: Callable[[str, int], str] = truncate_to_width,
) -> list[Fragment]:
    """Fit fragments into ``max_width`` columns, ending with ``ellipsis`` when cut.

    Args:
        fragments: One line of styled text, in order
        max_width: Display column budget
        ellipsis: Marker appended when content is removed
        ellipsis_style: Style of the marker
        measure: Column width of a string
        truncate: Longest prefix of a string fitting a column count

    Returns:
        The input fragments when they already fit, otherwise a new list
    """
    fragments = list(fragments)
    if ellipsis_style is None:
        ellipsis_style = Style.null()

    widths = [measure(f.text) for f in fragments]
    if sum(widths) <= max_width:
        return fragments

    ellipsis_width = measure(ellipsis)
    if ellipsis_width >= max_width:
        logger.debug(f"Ellipsis width {ellipsis_width} leaves no room in {max_width} columns")
        return [Fragment(text=truncate(ellipsis, max_width), style=ellipsis_style)]

    remaining = max_width - ellipsis_width
    result: list[Fragment] = []
    for fragment, width in zip(fragments, widths, strict=True):
        if width > remaining:
            truncated = truncate(fragment.text, remaining)
            if truncated:
                result.append(Fragment(text=truncated, style=fragment.style))
            break
        result.append(fragment)
        remaining -= width

    logger.debug(f"Truncated {len(fragments)} fragments to {len(result)} within {max_width} columns")
    if ellipsis:
        result.append(Fragment(text=ellipsis, style=ellipsis_style))
    return result


def truncate_with(fragments: Iterable[Fragment], options: TruncateOptions) -> list[Fragment]:
    """Run :func:`truncate_by_width` with a prepared options value."""
    return truncate_by_width(fragments, options.max_width, options.ellipsis, options.ellipsis_style)

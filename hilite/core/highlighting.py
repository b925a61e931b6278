"""Highlighting of matched ranges across styled fragments."""

import logging
from collections.abc import Callable, Iterable, Sequence

from rich.style import Style
from rich.text import Text

from hilite.core.cells import saturating_sub
from hilite.core.ranges import merge_ranges, validate_ranges
from hilite.core.styles import compose_styles, parse_style
from hilite.core.truncation import truncate_with
from hilite.models import Fragment, HighlightOptions, MatchRange, TruncateOptions

logger = logging.getLogger(__name__)

StyleComposer = Callable[[Style, Style], Style]


def clip_ranges(
    ranges: Sequence[MatchRange], limit: int, total_length: int
) -> tuple[list[tuple[int, int]], bool]:
    """Clip ranges at the point where the ellipsis begins.

    The first range ending past ``limit`` and everything after it collapse into
    one range running to ``total_length``. It keeps its own start when that
    start precedes ``limit``, otherwise it starts at ``limit``.

    Returns:
        The clipped spans and whether the trailing span starts before ``limit``
    """
    spans: list[tuple[int, int]] = []
    for r in ranges:
        if r.end > limit:
            start = r.start if r.start < limit else limit
            if start < total_length:
                spans.append((start, total_length))
                logger.debug(f"Clipped match range {r.as_tuple()} to {(start, total_length)} at limit {limit}")
                return spans, start < limit
            return spans, False
        spans.append(r.as_tuple())
    return spans, False


def highlight(
    fragments: Iterable[Fragment],
    match_ranges: Sequence[MatchRange],
    matched_style: Style,
    unmatched_style: Style,
    ellipsis: str | None = None,
    *,
    compose: StyleComposer = compose_styles,
    strict: bool = False,
    ellipsis_style: Style | None = None,
) -> list[Fragment]:
    """Split fragments at match boundaries and restyle each piece.

    Args:
        fragments: One line of styled text, in order
        match_ranges: Sorted, disjoint ranges over the concatenated text
        matched_style: Overlay composed onto matched pieces
        unmatched_style: Overlay composed onto unmatched pieces
        ellipsis: Marker standing in for the last len(ellipsis) characters
        compose: Style patching function, ``compose(base, overlay)``
        strict: Raise InvalidRangeError for unsorted or overlapping ranges
        ellipsis_style: Base style the ellipsis overlay is composed onto; the
            bare overlay is used when omitted

    Returns:
        New fragments; with an ellipsis the last one carries its text
    """
    fragments = list(fragments)
    if strict:
        validate_ranges(match_ranges)

    total_length = sum(len(f.text) for f in fragments)
    limit = total_length
    absorbed = False
    if ellipsis is not None:
        limit = saturating_sub(total_length, len(ellipsis))
        spans, absorbed = clip_ranges(match_ranges, limit, total_length)
    else:
        spans = [r.as_tuple() for r in match_ranges]

    result: list[Fragment] = []
    cursor = 0
    offset = 0
    for fragment in fragments:
        if offset >= limit:
            break
        fragment_end = offset + len(fragment.text)
        stop = min(fragment_end, limit)
        position = offset
        while position < stop:
            while cursor < len(spans) and spans[cursor][1] <= position:
                cursor += 1
            if cursor < len(spans) and spans[cursor][0] <= position:
                boundary = min(spans[cursor][1], stop)
                overlay = matched_style
            else:
                boundary = min(spans[cursor][0], stop) if cursor < len(spans) else stop
                overlay = unmatched_style
            piece = fragment.text[position - offset : boundary - offset]
            result.append(Fragment(text=piece, style=compose(fragment.style, overlay)))
            position = boundary
        offset = fragment_end

    if ellipsis:
        trailing_matched = bool(spans) and spans[-1][0] <= limit < spans[-1][1]
        overlay = matched_style if trailing_matched else unmatched_style
        style = overlay if ellipsis_style is None else compose(ellipsis_style, overlay)
        if absorbed and result and result[-1].style == style:
            result[-1] = Fragment(text=result[-1].text + ellipsis, style=style)
        else:
            result.append(Fragment(text=ellipsis, style=style))

    return result


def highlight_with(
    fragments: Iterable[Fragment], match_ranges: Sequence[MatchRange], options: HighlightOptions
) -> list[Fragment]:
    """Run :func:`highlight` with a prepared options value."""
    return highlight(
        fragments,
        match_ranges,
        options.matched_style,
        options.unmatched_style,
        options.ellipsis,
        strict=options.strict,
    )


def fragments_to_text(fragments: Iterable[Fragment]) -> Text:
    """Assemble fragments into a rich Text object."""
    return Text.assemble(*(f.as_tuple() for f in fragments), end="")


def highlight_text(
    text: str,
    indices: Iterable[int],
    *,
    matched_style: Style | str = "bold black on yellow",
    unmatched_style: Style | str = "",
    ellipsis: str | None = None,
) -> Text:
    """Apply highlighting to a plain string for the given matched positions.

    Args:
        text: The text to highlight
        indices: Matched character positions
        matched_style: Style for matched characters
        unmatched_style: Style for the remaining characters
        ellipsis: Trailing marker already present at the end of ``text``

    Returns:
        Rich Text object with highlighted positions
    """
    if isinstance(matched_style, str):
        matched_style = parse_style(matched_style)
    if isinstance(unmatched_style, str):
        unmatched_style = parse_style(unmatched_style)

    if not text:
        return Text(text)

    fragments = highlight([Fragment(text=text)], merge_ranges(indices), matched_style, unmatched_style, ellipsis)
    return fragments_to_text(fragments)


def render_fragments(
    fragments: Iterable[Fragment],
    match_ranges: Sequence[MatchRange],
    options: HighlightOptions,
    truncate_options: TruncateOptions | None = None,
) -> list[Fragment]:
    """Truncate a line to its width budget, then highlight the matches.

    When truncation removes content the marker it appended is treated as the
    highlight ellipsis, so a match running into the cut carries over onto it.
    The marker keeps its truncation style with the match overlay patched on.
    """
    fragments = list(fragments)
    ellipsis = options.ellipsis
    ellipsis_style = None
    if truncate_options is not None:
        truncated = truncate_with(fragments, truncate_options)
        elided = truncated != fragments
        fragments = truncated
        if elided and truncate_options.ellipsis:
            # Degenerate budgets leave only a prefix of the marker
            ellipsis = fragments[-1].text
            ellipsis_style = fragments[-1].style
        else:
            ellipsis = None
    return highlight(
        fragments,
        match_ranges,
        options.matched_style,
        options.unmatched_style,
        ellipsis,
        strict=options.strict,
        ellipsis_style=ellipsis_style,
    )

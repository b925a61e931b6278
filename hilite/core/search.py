"""Match position sources for highlighting search hits."""

import logging

from rapidfuzz import fuzz

from hilite.core.constants import SearchConstants

logger = logging.getLogger(__name__)


def fold_case(text: str) -> str:
    """Lower-case ``text`` one character at a time, keeping its length.

    Characters whose lower-case form is longer than one character are kept.
    """
    folded = []
    for character in text:
        lower = character.lower()
        folded.append(lower if len(lower) == 1 else character)
    return "".join(folded)


def subsequence_indices(query: str, text: str, case_sensitive: bool = False) -> list[int] | None:
    """Positions of ``query`` characters found in order inside ``text``.

    Each query character takes the earliest position after the previous one.

    Returns:
        Matched positions, or None if ``query`` is not a subsequence of ``text``
    """
    if not case_sensitive:
        query = fold_case(query)
        text = fold_case(text)

    positions: list[int] = []
    start = 0
    for character in query:
        pos = text.find(character, start)
        if pos == -1:
            return None
        positions.append(pos)
        start = pos + 1
    return positions


def fuzzy_indices(
    query: str,
    text: str,
    threshold: int = SearchConstants.DEFAULT_THRESHOLD,
) -> list[int] | None:
    """Positions of the best fuzzy substring match of ``query`` in ``text``.

    Uses partial_ratio alignment, so typos inside the phrase are tolerated
    while all words must appear together.

    Args:
        query: Search phrase
        text: Text to search in
        threshold: Minimum score for a match (0-100)

    Returns:
        Positions of the aligned substring, or None below the threshold
    """
    if not query or not text:
        return None

    alignment = fuzz.partial_ratio_alignment(fold_case(query), fold_case(text), score_cutoff=threshold)
    if alignment is None or alignment.dest_start >= alignment.dest_end:
        logger.debug(f"No fuzzy match for {query!r} above {threshold}")
        return None

    logger.debug(f"Fuzzy match for {query!r} scored {alignment.score:.0f}")
    return list(range(alignment.dest_start, alignment.dest_end))

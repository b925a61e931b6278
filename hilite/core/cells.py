"""Display width measurement for terminal cells."""

from rich.cells import cell_len, get_character_cell_size


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies (wide glyphs count twice)."""
    return cell_len(text)


def truncate_to_width(text: str, width: int) -> str:
    """Return the longest prefix of ``text`` that fits in ``width`` columns.

    Zero-width characters that follow the last fitting glyph are kept with it.
    """
    if width <= 0:
        return ""
    if cell_len(text) <= width:
        return text

    used = 0
    for index, character in enumerate(text):
        used += get_character_cell_size(character)
        if used > width:
            return text[:index]
    return text


def saturating_sub(value: int, amount: int) -> int:
    """Subtract without going below zero."""
    return value - amount if value > amount else 0

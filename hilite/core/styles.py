"""Style parsing and field-level style composition."""

from rich.errors import StyleSyntaxError
from rich.style import Style

from hilite.exceptions import StyleParseError


def compose_styles(base: Style, overlay: Style) -> Style:
    """Patch ``overlay`` onto ``base``.

    Attributes set in ``overlay`` replace those of ``base``; attributes it
    leaves unset keep the value from ``base``.
    """
    return base + overlay


def parse_style(definition: str | None) -> Style:
    """Parse a rich style definition such as ``"bold yellow on blue"``.

    Raises:
        StyleParseError: If the definition is not valid rich style syntax
    """
    if definition is None or not definition.strip():
        return Style.null()
    try:
        return Style.parse(definition)
    except StyleSyntaxError as e:
        raise StyleParseError(definition, str(e)) from e

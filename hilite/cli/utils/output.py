"""Shared output handlers for CLI commands."""

import json
from collections.abc import Callable
from typing import Any

from rich.console import Console, RenderableType

from hilite.core.constants import FormattingConstants

console = Console()


def handle_json_output(
    data: Any,
    transformer: Callable[[Any], Any] | None = None,
) -> None:
    """Handle JSON format output.

    Args:
        data: Data to output (can be any type)
        transformer: Optional function to transform data before serialization
    """
    output_data = transformer(data) if transformer else data
    print(json.dumps(output_data, indent=FormattingConstants.JSON_INDENT, default=str))


def handle_text_output(renderable: RenderableType) -> None:
    """Print a renderable without wrapping or highlighting markup."""
    console.print(renderable, highlight=False, soft_wrap=True)

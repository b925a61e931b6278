"""Styled text fragment and match range models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from rich.style import Style


class MatchRange(BaseModel):
    """Half-open ``[start, end)`` span of matched characters.

    Offsets index into the concatenation of every fragment of a line, not into
    a single fragment.
    """

    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0, description="First matched offset")
    end: int = Field(gt=0, description="Offset one past the last matched character")

    @model_validator(mode="after")
    def check_order(self) -> "MatchRange":
        """Reject empty and inverted ranges."""
        if self.start >= self.end:
            raise ValueError(f"start ({self.start}) must be less than end ({self.end})")
        return self

    def __len__(self) -> int:
        return self.end - self.start

    def __contains__(self, offset: object) -> bool:
        return isinstance(offset, int) and self.start <= offset < self.end

    def as_tuple(self) -> tuple[int, int]:
        return self.start, self.end


class Fragment(BaseModel):
    """A contiguous piece of text carrying one style."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    text: str = Field(default="", description="Fragment content")
    style: Style = Field(default_factory=Style.null, description="Rich style applied to the content")

    @classmethod
    def of(cls, text: str, style: Style | str | None = None) -> "Fragment":
        """Build a fragment, accepting a style definition string or None."""
        if style is None:
            return cls(text=text)
        if isinstance(style, str):
            from hilite.core.styles import parse_style

            style = parse_style(style)
        return cls(text=text, style=style)

    def as_tuple(self) -> tuple[str, Style]:
        return self.text, self.style

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used by JSON output."""
        return {"text": self.text, "style": str(self.style) if self.style else ""}

    def __str__(self) -> str:
        return self.text

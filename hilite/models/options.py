"""Immutable option values passed to the highlighter and truncator."""

from pydantic import BaseModel, ConfigDict, Field
from rich.style import Style


class HighlightOptions(BaseModel):
    """Styles and ellipsis used when highlighting matched ranges."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    matched_style: Style = Field(default_factory=Style.null, description="Overlay for matched text")
    unmatched_style: Style = Field(default_factory=Style.null, description="Overlay for unmatched text")
    ellipsis: str | None = Field(default=None, description="Marker that replaces the elided tail")
    strict: bool = Field(default=False, description="Validate that match ranges are sorted and disjoint")


class TruncateOptions(BaseModel):
    """Width budget and ellipsis used when truncating fragments."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    max_width: int = Field(ge=0, description="Maximum display columns")
    ellipsis: str = Field(default="", description="Marker appended when content is removed")
    ellipsis_style: Style = Field(default_factory=Style.null, description="Style of the ellipsis marker")

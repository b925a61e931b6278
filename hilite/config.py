"""Configuration management for hilite."""

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hilite.core.constants import SearchConstants, StyleDefaults, TextDefaults
from hilite.core.styles import parse_style
from hilite.exceptions import ConfigurationError
from hilite.models import HighlightOptions, TruncateOptions


class HiliteConfig(BaseSettings):
    """Application configuration."""

    matched_style: str = Field(
        default=StyleDefaults.MATCHED.value,
        alias="HILITE_MATCHED_STYLE",
        description="Rich style composed onto matched text",
    )
    unmatched_style: str = Field(
        default=StyleDefaults.UNMATCHED.value,
        alias="HILITE_UNMATCHED_STYLE",
        description="Rich style composed onto unmatched text",
    )
    ellipsis: str = Field(
        default=TextDefaults.ELLIPSIS.value,
        alias="HILITE_ELLIPSIS",
        description="Marker appended when content is elided",
    )
    ellipsis_style: str = Field(
        default=StyleDefaults.ELLIPSIS.value,
        alias="HILITE_ELLIPSIS_STYLE",
        description="Rich style of the ellipsis marker when truncating by width",
    )
    max_width: int | None = Field(
        default=None,
        ge=0,
        alias="HILITE_MAX_WIDTH",
        description="Default display column budget (None disables truncation)",
    )
    search_threshold: int = Field(
        default=SearchConstants.DEFAULT_THRESHOLD.value,
        ge=SearchConstants.MIN_THRESHOLD,
        le=SearchConstants.MAX_THRESHOLD,
        alias="HILITE_SEARCH_THRESHOLD",
        description="Minimum fuzzy match score (0-100)",
    )
    strict_ranges: bool = Field(
        default=False,
        alias="HILITE_STRICT_RANGES",
        description="Reject unsorted or overlapping match ranges",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )

    def highlight_options(self, ellipsis: bool = False) -> HighlightOptions:
        """Build highlight options from the configured style strings."""
        return HighlightOptions(
            matched_style=parse_style(self.matched_style),
            unmatched_style=parse_style(self.unmatched_style),
            ellipsis=self.ellipsis if ellipsis else None,
            strict=self.strict_ranges,
        )

    def truncate_options(self, max_width: int | None = None) -> TruncateOptions | None:
        """Build truncate options, or None when no width budget is set."""
        width = max_width if max_width is not None else self.max_width
        if width is None:
            return None
        return TruncateOptions(
            max_width=width,
            ellipsis=self.ellipsis,
            ellipsis_style=parse_style(self.ellipsis_style),
        )


def load_config() -> HiliteConfig:
    """Load configuration from environment and .env file.

    Raises:
        ConfigurationError: If a setting has an invalid value
    """
    try:
        return HiliteConfig()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e.error_count()} error(s)", {"errors": e.errors()}) from e

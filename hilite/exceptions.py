"""Custom exceptions for hilite."""

from typing import Any


class HiliteError(Exception):
    """Base exception for all hilite errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize hilite error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(HiliteError):
    """Raised when configuration is invalid or missing."""


class StyleParseError(ConfigurationError):
    """Raised when a style definition cannot be parsed."""

    def __init__(self, definition: str, reason: str) -> None:
        super().__init__(f"Invalid style '{definition}': {reason}", {"definition": definition})
        self.definition = definition
        self.reason = reason


class ValidationError(HiliteError):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message, {"field": field, "value": value})
        self.field = field
        self.value = value


class InvalidRangeError(ValidationError):
    """Raised when a match range list is not sorted and disjoint."""

    def __init__(self, index: int, value: Any, reason: str) -> None:
        super().__init__("match_ranges", value, f"Invalid match range at position {index}: {reason}")
        self.index = index
        self.reason = reason

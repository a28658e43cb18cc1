"""
Custom exceptions for InsightLens.

This module defines a hierarchy of exceptions for handling errors
throughout the application in a consistent manner.

The analysis core degrades silently for incomplete inputs (unknown field ids,
missing metric columns, empty candidate buckets). These exceptions are only
raised for caller misuse such as unsupported argument types.
"""

from typing import Any


class InsightLensError(Exception):
    """
    Base exception for all InsightLens errors.

    Attributes:
        message: Human-readable error message
        details: Additional error details for debugging
        error_code: Optional error code for API responses
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.error_code = error_code or "INSIGHTLENS_ERROR"

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error": True,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(InsightLensError):
    """
    Raised when there is a configuration error.

    Examples:
        - Invalid environment values
        - Inconsistent cache settings
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            details=details,
            error_code="CONFIGURATION_ERROR",
        )


class DataValidationError(InsightLensError):
    """
    Raised when input data has an unsupported shape.

    Examples:
        - Source rows that are neither mappings nor a DataFrame
        - Negative preview row caps
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            details=details,
            error_code="DATA_VALIDATION_ERROR",
        )
        self.field = field


class ChartSuggestionError(InsightLensError):
    """
    Raised when a suggestion request names an unknown chart type or tag.

    Missing data never raises; it only produces fewer suggestions.
    """

    def __init__(
        self,
        message: str,
        chart_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if chart_type:
            details["chart_type"] = chart_type

        super().__init__(
            message=message,
            details=details,
            error_code="CHART_SUGGESTION_ERROR",
        )
        self.chart_type = chart_type

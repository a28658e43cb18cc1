"""Utility modules for InsightLens."""

from insightlens.utils.exceptions import (
    ChartSuggestionError,
    ConfigurationError,
    DataValidationError,
    InsightLensError,
)
from insightlens.utils.validators import (
    validate_chart_tag,
    validate_chart_type,
    validate_dataframe,
    validate_max_rows,
    validate_rows,
)

__all__ = [
    # Exceptions
    "InsightLensError",
    "ConfigurationError",
    "DataValidationError",
    "ChartSuggestionError",
    # Validators
    "validate_dataframe",
    "validate_rows",
    "validate_max_rows",
    "validate_chart_type",
    "validate_chart_tag",
]

"""
Validation utilities for InsightLens.

This module provides validation functions for source row sets and
caller-supplied arguments of the analysis core.
"""

import math
from collections.abc import Mapping, Sequence
from typing import Any, Union

import numpy as np
import pandas as pd

from insightlens.models.visualization import ChartTag, ChartType
from insightlens.utils.exceptions import ChartSuggestionError, DataValidationError

RowSet = Union[Sequence[Mapping[str, Any]], pd.DataFrame]

# Maximum values for validation
MAX_COLUMN_NAME_LENGTH = 256


def _clean_value(value: Any) -> Any:
    """Normalize pandas missing markers and numpy scalars to plain Python."""
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, np.generic):
        value = value.item()
        if isinstance(value, float) and math.isnan(value):
            return None
    return value


def validate_dataframe(df: pd.DataFrame) -> list[dict[str, Any]]:
    """
    Validate a pandas DataFrame and convert it to a list of row mappings.

    NaN and NaT cells become None so missing values group and aggregate the
    same way as in plain row mappings.

    Args:
        df: DataFrame to validate

    Returns:
        One dict per DataFrame row

    Raises:
        DataValidationError: If validation fails
    """
    if not isinstance(df, pd.DataFrame):
        raise DataValidationError(
            message="Input must be a pandas DataFrame",
            field="dataframe",
        )

    for col in df.columns:
        col_str = str(col)
        if len(col_str) > MAX_COLUMN_NAME_LENGTH:
            raise DataValidationError(
                message=f"Column name exceeds maximum length of {MAX_COLUMN_NAME_LENGTH}",
                field="column_name",
                details={"column": col_str[:50] + "..."},
            )

    duplicate_columns = df.columns[df.columns.duplicated()].tolist()
    if duplicate_columns:
        raise DataValidationError(
            message="DataFrame contains duplicate column names",
            field="columns",
            details={"duplicate_columns": duplicate_columns},
        )

    return [
        {str(key): _clean_value(value) for key, value in record.items()}
        for record in df.to_dict(orient="records")
    ]


def validate_rows(source_rows: RowSet) -> Sequence[Mapping[str, Any]]:
    """
    Validate a source row set.

    Accepts a list (or tuple) of mappings or a pandas DataFrame. Mapping rows
    are returned as given and are never modified.

    Args:
        source_rows: Raw rows to aggregate

    Returns:
        A sequence of row mappings

    Raises:
        DataValidationError: If the row set has an unsupported type
    """
    if isinstance(source_rows, pd.DataFrame):
        return validate_dataframe(source_rows)

    if isinstance(source_rows, (str, bytes)) or not isinstance(source_rows, Sequence):
        raise DataValidationError(
            message="Source rows must be a sequence of mappings or a DataFrame",
            field="source_rows",
            details={"type": type(source_rows).__name__},
        )

    for index, row in enumerate(source_rows):
        if not isinstance(row, Mapping):
            raise DataValidationError(
                message=f"Row {index} is not a mapping",
                field="source_rows",
                details={"index": index, "type": type(row).__name__},
            )

    return source_rows


def validate_max_rows(max_rows: float) -> float:
    """
    Validate a preview row cap.

    ``math.inf`` means no cap. Finite caps must be non-negative.

    Raises:
        DataValidationError: If the cap is negative or not a number
    """
    if isinstance(max_rows, bool) or not isinstance(max_rows, (int, float)):
        raise DataValidationError(
            message="max_rows must be a number",
            field="max_rows",
            details={"type": type(max_rows).__name__},
        )
    if math.isnan(max_rows) or max_rows < 0:
        raise DataValidationError(
            message=f"max_rows must be non-negative, got {max_rows}",
            field="max_rows",
            details={"max_rows": max_rows},
        )
    return max_rows


def validate_chart_type(chart_type: Union[ChartType, str]) -> ChartType:
    """
    Coerce a chart type string to ChartType.

    Raises:
        ChartSuggestionError: If the chart type is unknown
    """
    try:
        return ChartType(chart_type)
    except ValueError:
        raise ChartSuggestionError(
            message=f"Unknown chart type: {chart_type}",
            chart_type=str(chart_type),
            details={"supported": [t.value for t in ChartType]},
        )


def validate_chart_tag(tag: Union[ChartTag, str]) -> ChartTag:
    """
    Coerce an analytical intent string to ChartTag.

    Raises:
        ChartSuggestionError: If the tag is unknown
    """
    try:
        return ChartTag(tag)
    except ValueError:
        raise ChartSuggestionError(
            message=f"Unknown chart tag: {tag}",
            details={"tag": str(tag), "supported": [t.value for t in ChartTag]},
        )

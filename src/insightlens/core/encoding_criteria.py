"""
Encoding suitability criteria.

Single source of truth for deciding whether a column fits a chart channel.
The chart suggester uses these checks to filter candidates and the axis
warnings use them to flag poor user choices, so both always agree.
"""

from collections.abc import Mapping

from insightlens.models.column import (
    BLOCKED_SEMANTICS,
    CATEGORICAL_X_MAX,
    COLOR_MAX,
    COLOR_MIN,
    MAX_NULL_RATIO,
    MAX_ZERO_RATIO,
    NUMERIC_BAR_X_MAX,
    ColumnAnalysis,
    ColumnSemantic,
    EncodingEvaluation,
    NumberAnalysis,
    looks_like_identifier,
)
from insightlens.models.insight import DataField
from insightlens.models.visualization import SCATTER_LIKE_TYPES, ChartType


def is_blocked_column(
    col: ColumnAnalysis,
    field: DataField | None = None,
    row_count: int | None = None,
) -> EncodingEvaluation:
    """
    Check if a column must never be placed on a chart channel.

    Blocked columns include identifiers, references, columns whose name
    follows identifier conventions and columns missing more than half of
    their values.

    Args:
        col: Column analysis
        field: Optional field metadata carrying identifier/reference flags
        row_count: Optional total row count for the null ratio

    Returns:
        EncodingEvaluation verdict
    """
    if col.semantic in BLOCKED_SEMANTICS:
        return EncodingEvaluation.reject(
            "This column contains unique identifiers or references that "
            "cannot be meaningfully visualized."
        )

    if field is not None and (field.is_identifier or field.is_reference):
        return EncodingEvaluation.reject(
            "This column is marked as an identifier or reference and should "
            "not be used for axes."
        )

    if looks_like_identifier(col.column_name):
        return EncodingEvaluation.reject(
            "Column name suggests this is an identifier (ID, key, etc.) which "
            "is not suitable for visualization."
        )

    if row_count and row_count > 0 and col.null_count / row_count > MAX_NULL_RATIO:
        return EncodingEvaluation.reject(
            "More than 50% of values are missing. Consider filtering or "
            "choosing a different column."
        )

    return EncodingEvaluation.ok()


def _category_axis(col: ColumnAnalysis, chart_label: str) -> EncodingEvaluation:
    """Rules for the category axis of a bar chart."""
    semantic = col.semantic
    cardinality = col.cardinality

    if semantic in (ColumnSemantic.CATEGORICAL, ColumnSemantic.BOOLEAN):
        if cardinality <= 1:
            return EncodingEvaluation.reject(
                f"This column has only one unique value. {chart_label} need "
                "categories to compare."
            )
        if cardinality > CATEGORICAL_X_MAX:
            return EncodingEvaluation.reject(
                f"Too many categories ({cardinality}). Consider using a "
                "Histogram or filtering the data."
            )
        return EncodingEvaluation.ok()

    if semantic == ColumnSemantic.TEMPORAL:
        return EncodingEvaluation.ok()

    if semantic == ColumnSemantic.NUMERICAL and cardinality > NUMERIC_BAR_X_MAX:
        return EncodingEvaluation.reject(
            "Many unique numerical values. Consider a Histogram or Scatter "
            "plot instead."
        )

    return EncodingEvaluation.ok()


def _measure_axis(
    col: ColumnAnalysis,
    chart_type: ChartType,
    row_count: int | None,
) -> EncodingEvaluation:
    """Rules for the value axis: numerical with variance."""
    if col.semantic != ColumnSemantic.NUMERICAL:
        label = chart_type.value.replace("_", " ").capitalize()
        return EncodingEvaluation.reject(
            f"{label} charts need numerical values on the value axis to show "
            "height/position."
        )
    return has_numerical_variance(col, row_count)


def is_good_x_axis(
    col: ColumnAnalysis,
    chart_type: ChartType,
    field: DataField | None = None,
    row_count: int | None = None,
) -> EncodingEvaluation:
    """
    Check if a column is suitable for the X axis of a chart type.

    - Scatter-like: numerical required
    - Line/Area: temporal or numerical, categorical within [2, CATEGORICAL_X_MAX]
    - Bar: categorical/boolean within (1, CATEGORICAL_X_MAX], temporal, or
      numerical with few distinct values
    - Horizontal bar: the measure sits on X
    """
    blocked = is_blocked_column(col, field, row_count)
    if not blocked.good:
        return blocked

    semantic = col.semantic
    cardinality = col.cardinality

    if chart_type in SCATTER_LIKE_TYPES:
        if semantic != ColumnSemantic.NUMERICAL:
            return EncodingEvaluation.reject(
                "Scatter plots need numerical values on both axes to show "
                "correlations."
            )
        return EncodingEvaluation.ok()

    if chart_type in (ChartType.LINE, ChartType.AREA):
        if semantic in (ColumnSemantic.TEMPORAL, ColumnSemantic.NUMERICAL):
            return EncodingEvaluation.ok()
        if semantic in (ColumnSemantic.CATEGORICAL, ColumnSemantic.BOOLEAN):
            if cardinality < 2:
                return EncodingEvaluation.reject(
                    "This column has only one unique value. Line charts need "
                    "at least two points."
                )
            if cardinality > CATEGORICAL_X_MAX:
                return EncodingEvaluation.reject(
                    f"Too many categories ({cardinality}). Line charts work "
                    "best with time-series or fewer than "
                    f"{CATEGORICAL_X_MAX} categories."
                )
            return EncodingEvaluation.ok()
        return EncodingEvaluation.reject(
            "Line charts work best with time-series or continuous data."
        )

    if chart_type == ChartType.BAR:
        return _category_axis(col, "Bar charts")

    if chart_type == ChartType.BAR_HORIZONTAL:
        return _measure_axis(col, chart_type, row_count)

    return EncodingEvaluation.ok()


def is_good_y_axis(
    col: ColumnAnalysis,
    chart_type: ChartType,
    field: DataField | None = None,
    row_count: int | None = None,
) -> EncodingEvaluation:
    """
    Check if a column is suitable for the Y axis of a chart type.

    The Y axis carries the measure for every chart except tables, which
    accept anything, and horizontal bars, which put the category on Y.
    """
    blocked = is_blocked_column(col, field, row_count)
    if not blocked.good:
        return blocked

    if chart_type == ChartType.TABLE:
        return EncodingEvaluation.ok()

    if chart_type == ChartType.BAR_HORIZONTAL:
        return _category_axis(col, "Horizontal bar charts")

    return _measure_axis(col, chart_type, row_count)


def is_good_color_column(
    col: ColumnAnalysis,
    current_encoding: Mapping[str, str | None] | None = None,
) -> EncodingEvaluation:
    """
    Check if a column is suitable for color encoding.

    Color works best with categorical or boolean columns holding between
    COLOR_MIN and COLOR_MAX values. Numerical columns render as a gradient.

    Args:
        col: Column analysis
        current_encoding: Optional mapping with the columns already on "x"/"y"
    """
    semantic = col.semantic
    cardinality = col.cardinality

    if current_encoding and col.column_name in (
        current_encoding.get("x"),
        current_encoding.get("y"),
    ):
        return EncodingEvaluation.reject(
            "This column is already used on an axis. Color works best with a "
            "different dimension."
        )

    if not is_blocked_column(col).good:
        return EncodingEvaluation.reject(
            "Unique IDs or references create too many distinct colors to be "
            "meaningful."
        )

    if cardinality < COLOR_MIN:
        return EncodingEvaluation.reject(
            "This column has only one unique value. Color needs at least 2 "
            "values to differentiate."
        )

    if cardinality > COLOR_MAX:
        return EncodingEvaluation.reject(
            f"Too many categories ({cardinality}). Color legends are hard to "
            f"read with more than {COLOR_MAX} values."
        )

    if semantic == ColumnSemantic.TEMPORAL:
        return EncodingEvaluation.reject(
            "Temporal columns typically have too many unique values for color "
            "encoding."
        )

    return EncodingEvaluation.ok()


def has_numerical_variance(
    col: ColumnAnalysis,
    row_count: int | None = None,
) -> EncodingEvaluation:
    """
    Check if a numerical column has meaningful variance.

    Columns holding one repeated value or mostly zeros flatten every chart.
    Falls back to cardinality when min/max statistics are missing.
    """
    if isinstance(col, NumberAnalysis) and col.min is not None and col.max is not None:
        if col.min == col.max:
            return EncodingEvaluation.reject(
                "All values are the same. Charts need variance to show "
                "meaningful patterns."
            )

        if col.zero_count is not None and row_count and row_count > 0:
            if col.zero_count / row_count > MAX_ZERO_RATIO:
                return EncodingEvaluation.reject(
                    "More than 80% of values are zero. Consider filtering or "
                    "choosing a different metric."
                )

        return EncodingEvaluation.ok()

    if col.cardinality <= 1:
        return EncodingEvaluation.reject(
            "This column has only one unique value. Charts need variance to "
            "show patterns."
        )

    return EncodingEvaluation.ok()


def is_suitable_categorical_x_axis(col: ColumnAnalysis) -> bool:
    """Cardinality check for categorical X candidates: (1, CATEGORICAL_X_MAX]."""
    return 1 < col.cardinality <= CATEGORICAL_X_MAX


def is_suitable_color_column(col: ColumnAnalysis) -> bool:
    """Boolean form of the color check used when bucketing columns."""
    return is_good_color_column(col).good

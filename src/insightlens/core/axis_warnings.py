"""
Warnings for user-chosen chart encodings.

When a user assigns columns to chart channels by hand, each channel is
checked with the same criteria the suggestion engine uses, so a column the
engine would never suggest is flagged with the reason.
"""

from collections.abc import Mapping, Sequence
from typing import Union

from insightlens.core.encoding_criteria import (
    is_good_color_column,
    is_good_x_axis,
    is_good_y_axis,
)
from insightlens.core.suggestion_scoring import normalize_column_reference
from insightlens.models.column import (
    ColumnAnalysis,
    ColumnSemantic,
    EncodingEvaluation,
)
from insightlens.models.insight import DataField
from insightlens.models.visualization import ChartEncoding, ChartType
from insightlens.utils.validators import validate_chart_type

CHANNELS = ("x", "y", "color", "size")


def _find_column(
    column_name: str | None,
    columns: Sequence[ColumnAnalysis],
) -> ColumnAnalysis | None:
    normalized = normalize_column_reference(column_name)
    if normalized is None:
        return None
    for col in columns:
        if col.column_name == normalized:
            return col
    return None


def _find_field(
    col: ColumnAnalysis,
    fields: Mapping[str, DataField] | None,
) -> DataField | None:
    if not fields:
        return None
    if col.field_id and col.field_id in fields:
        return fields[col.field_id]
    return fields.get(col.column_name)


def get_column_warning(
    column_name: str | None,
    channel: str,
    chart_type: Union[ChartType, str],
    columns: Sequence[ColumnAnalysis],
    fields: Mapping[str, DataField] | None = None,
    row_count: int | None = None,
    current_encoding: Mapping[str, str | None] | None = None,
) -> EncodingEvaluation:
    """
    Evaluate one column on one chart channel.

    Columns missing from the analysis (metric aliases, computed columns) are
    not judged and evaluate as good.

    Args:
        column_name: Column or aggregate expression on the channel
        channel: One of "x", "y", "color", "size"
        chart_type: Chart type being configured
        columns: Column analyses available to the chart
        fields: Field metadata keyed by field id or column name
        row_count: Total row count
        current_encoding: Columns already on the other channels

    Returns:
        EncodingEvaluation verdict
    """
    chart_type = validate_chart_type(chart_type)
    col = _find_column(column_name, columns)
    if col is None:
        return EncodingEvaluation.ok()

    field = _find_field(col, fields)

    if channel == "x":
        return is_good_x_axis(col, chart_type, field, row_count)
    if channel == "y":
        return is_good_y_axis(col, chart_type, field, row_count)
    if channel == "color":
        if current_encoding:
            current_encoding = {
                key: normalize_column_reference(current_encoding.get(key))
                for key in ("x", "y")
            }
        return is_good_color_column(col, current_encoding)
    if channel == "size":
        if col.semantic != ColumnSemantic.NUMERICAL:
            return EncodingEvaluation.reject(
                "Size encodes magnitude and needs a numerical column."
            )
        return EncodingEvaluation.ok()

    return EncodingEvaluation.ok()


def get_encoding_warnings(
    encoding: ChartEncoding,
    chart_type: Union[ChartType, str],
    columns: Sequence[ColumnAnalysis],
    fields: Mapping[str, DataField] | None = None,
    row_count: int | None = None,
) -> dict[str, EncodingEvaluation]:
    """
    Evaluate every channel set on an encoding.

    Returns:
        Verdict per channel name, only for channels holding a column
    """
    current = {"x": encoding.x, "y": encoding.y}
    warnings: dict[str, EncodingEvaluation] = {}

    for channel in CHANNELS:
        value = getattr(encoding, channel)
        if not value:
            continue
        warnings[channel] = get_column_warning(
            value,
            channel,
            chart_type,
            columns,
            fields=fields,
            row_count=row_count,
            current_encoding=current if channel == "color" else None,
        )

    return warnings


def rank_column_options(
    channel: str,
    chart_type: Union[ChartType, str],
    columns: Sequence[ColumnAnalysis],
    fields: Mapping[str, DataField] | None = None,
    row_count: int | None = None,
    current_encoding: Mapping[str, str | None] | None = None,
) -> list[tuple[ColumnAnalysis, EncodingEvaluation]]:
    """Column choices for a channel, good ones first, input order kept within each group."""
    evaluated = [
        (
            col,
            get_column_warning(
                col.column_name,
                channel,
                chart_type,
                columns,
                fields=fields,
                row_count=row_count,
                current_encoding=current_encoding,
            ),
        )
        for col in columns
    ]
    return sorted(evaluated, key=lambda item: 0 if item[1].good else 1)

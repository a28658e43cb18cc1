"""
Temporal aggregation auto-selection.

Picks a date truncation for a time axis so a chart shows roughly 20 to 100
points given the column's date range.
"""

from insightlens.models.column import ColumnAnalysis, ColumnSemantic, DateAnalysis
from insightlens.models.visualization import ChannelTransform, TemporalAggregation

MS_PER_DAY = 1000 * 60 * 60 * 24


def select_temporal_aggregation(
    min_date: float | None,
    max_date: float | None,
) -> TemporalAggregation:
    """
    Select a temporal aggregation from a date range in epoch milliseconds.

    Thresholds:
        - under 14 days: raw values
        - under ~6 months: weekly
        - under ~5 years: monthly
        - longer: yearly

    Monthly is the default when the range is unknown.
    """
    if min_date is None or max_date is None:
        return TemporalAggregation.YEAR_MONTH

    range_days = (max_date - min_date) / MS_PER_DAY

    if range_days < 14:
        return TemporalAggregation.NONE
    if range_days < 180:
        return TemporalAggregation.YEAR_WEEK
    if range_days < 1825:
        return TemporalAggregation.YEAR_MONTH
    return TemporalAggregation.YEAR


def transform_for_column(col: ColumnAnalysis) -> ChannelTransform | None:
    """Date transform for a column placed on a time axis, None for non-dates."""
    if isinstance(col, DateAnalysis):
        return ChannelTransform(
            aggregation=select_temporal_aggregation(col.min_date, col.max_date)
        )
    if col.semantic == ColumnSemantic.TEMPORAL:
        return ChannelTransform(aggregation=select_temporal_aggregation(None, None))
    return None

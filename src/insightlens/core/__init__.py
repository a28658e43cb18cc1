"""Aggregation, analysis merging and chart suggestion engine for InsightLens."""

from insightlens.core.aggregation import (
    compute_insight_dataframe,
    compute_insight_preview,
)
from insightlens.core.analysis_merger import (
    AnalysisCache,
    AnalysisEntry,
    are_analyses_valid,
    merge_analyses,
    resolve_merged_columns,
)
from insightlens.core.axis_warnings import (
    get_column_warning,
    get_encoding_warnings,
    rank_column_options,
)
from insightlens.core.chart_suggester import ChartSuggester, bucket_columns
from insightlens.core.encoding_criteria import (
    has_numerical_variance,
    is_blocked_column,
    is_good_color_column,
    is_good_x_axis,
    is_good_y_axis,
)

__all__ = [
    # Aggregation
    "compute_insight_preview",
    "compute_insight_dataframe",
    # Analysis merging
    "AnalysisCache",
    "AnalysisEntry",
    "merge_analyses",
    "are_analyses_valid",
    "resolve_merged_columns",
    # Encoding criteria
    "is_blocked_column",
    "is_good_x_axis",
    "is_good_y_axis",
    "is_good_color_column",
    "has_numerical_variance",
    # Axis warnings
    "get_column_warning",
    "get_encoding_warnings",
    "rank_column_options",
    # Suggestions
    "ChartSuggester",
    "bucket_columns",
]

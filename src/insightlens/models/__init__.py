"""Data models for InsightLens."""

from insightlens.models.column import (
    ArrayAnalysis,
    BooleanAnalysis,
    ColumnAnalysis,
    ColumnDataType,
    ColumnSemantic,
    DataFrameAnalysis,
    DateAnalysis,
    EncodingEvaluation,
    NumberAnalysis,
    StringAnalysis,
    UnknownAnalysis,
    compute_field_hash,
)
from insightlens.models.insight import (
    AggregationType,
    DataField,
    DataTable,
    Insight,
    InsightDataFrame,
    InsightFilter,
    InsightJoin,
    InsightMetric,
    PreviewColumn,
    PreviewResult,
)
from insightlens.models.visualization import (
    AxisType,
    ChannelTransform,
    ChartEncoding,
    ChartSuggestion,
    ChartTag,
    ChartType,
    TagSuggestion,
    TemporalAggregation,
)

__all__ = [
    # Column analysis models
    "ColumnAnalysis",
    "ColumnDataType",
    "ColumnSemantic",
    "StringAnalysis",
    "NumberAnalysis",
    "DateAnalysis",
    "BooleanAnalysis",
    "ArrayAnalysis",
    "UnknownAnalysis",
    "DataFrameAnalysis",
    "EncodingEvaluation",
    "compute_field_hash",
    # Insight models
    "AggregationType",
    "DataField",
    "DataTable",
    "Insight",
    "InsightMetric",
    "InsightJoin",
    "InsightFilter",
    "InsightDataFrame",
    "PreviewColumn",
    "PreviewResult",
    # Visualization models
    "AxisType",
    "ChannelTransform",
    "ChartEncoding",
    "ChartSuggestion",
    "ChartTag",
    "ChartType",
    "TagSuggestion",
    "TemporalAggregation",
]

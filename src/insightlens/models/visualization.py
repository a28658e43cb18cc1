"""
Visualization data models.

This module defines Pydantic models for chart encodings and chart suggestions,
plus the static metadata (display names, priorities, alternatives) attached to
each chart type.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ChartType(str, Enum):
    """Supported chart types."""

    BAR = "bar"
    BAR_HORIZONTAL = "bar_horizontal"
    LINE = "line"
    AREA = "area"
    SCATTER = "scatter"
    HEXBIN = "hexbin"
    HEATMAP = "heatmap"
    TABLE = "table"


class ChartTag(str, Enum):
    """Analytical intents a chart can serve."""

    COMPARISON = "comparison"
    TREND = "trend"
    CORRELATION = "correlation"
    DISTRIBUTION = "distribution"


class AxisType(str, Enum):
    """Scale type of an encoding channel."""

    QUANTITATIVE = "quantitative"
    NOMINAL = "nominal"
    ORDINAL = "ordinal"
    TEMPORAL = "temporal"


class TemporalAggregation(str, Enum):
    """Date truncation applied to a time axis."""

    NONE = "none"
    YEAR_WEEK = "yearWeek"
    YEAR_MONTH = "yearMonth"
    YEAR = "year"


class ChannelTransform(BaseModel):
    """Temporal transform applied to an encoding channel."""

    type: str = "date"
    kind: str = "temporal"
    aggregation: TemporalAggregation = TemporalAggregation.YEAR_MONTH


class ChartEncoding(BaseModel):
    """
    Mapping of chart channels to columns or aggregate expressions.

    Attributes:
        x: Column or expression on the X axis
        y: Column or expression on the Y axis
        x_type: Scale type of the X axis
        y_type: Scale type of the Y axis
        color: Column on the color channel
        size: Column on the size channel
    """

    x: str | None = None
    y: str | None = None
    x_type: AxisType | None = None
    y_type: AxisType | None = None
    color: str | None = None
    size: str | None = None

    @property
    def signature(self) -> str:
        """``x|y|color`` key used to deduplicate suggestions."""
        return "|".join([self.x or "", self.y or "", self.color or ""])


class ChartSuggestion(BaseModel):
    """
    A ready-to-apply chart proposal.

    Suggestions are regenerated on demand and never persisted.

    Attributes:
        id: Deterministic identifier derived from chart type and columns
        title: Suggested chart title
        chart_type: Chart type
        encoding: Channel assignments
        rationale: Why this chart was suggested
        new_fields: Columns not yet selected in the insight
        uses_existing_fields_only: True when no new columns are needed
        x_transform: Date transform for the X axis
        y_transform: Date transform for the Y axis
    """

    id: str
    title: str = Field(min_length=1)
    chart_type: ChartType
    encoding: ChartEncoding
    rationale: str | None = None
    new_fields: list[str] | None = None
    uses_existing_fields_only: bool | None = None
    x_transform: ChannelTransform | None = None
    y_transform: ChannelTransform | None = None

    @property
    def signature(self) -> str:
        return self.encoding.signature


class TagSuggestion(ChartSuggestion):
    """A chart suggestion chosen for one analytical intent."""

    tag: ChartTag
    tag_display_name: str
    tag_description: str
    chart_display_name: str


class ChartTypeInfo(BaseModel):
    """Static metadata about a chart type."""

    display_name: str
    priority: int
    alternatives: list[ChartType] = Field(default_factory=list)


class ChartTagInfo(BaseModel):
    """Static metadata about an analytical intent."""

    display_name: str
    description: str


CHART_TYPE_INFO: dict[ChartType, ChartTypeInfo] = {
    ChartType.LINE: ChartTypeInfo(
        display_name="Line chart", priority=1, alternatives=[ChartType.AREA]
    ),
    ChartType.AREA: ChartTypeInfo(
        display_name="Area chart", priority=1, alternatives=[ChartType.LINE]
    ),
    ChartType.BAR: ChartTypeInfo(
        display_name="Bar chart",
        priority=2,
        alternatives=[ChartType.BAR_HORIZONTAL],
    ),
    ChartType.BAR_HORIZONTAL: ChartTypeInfo(
        display_name="Horizontal bar chart",
        priority=2,
        alternatives=[ChartType.BAR],
    ),
    ChartType.SCATTER: ChartTypeInfo(
        display_name="Scatter plot",
        priority=3,
        alternatives=[ChartType.HEXBIN, ChartType.HEATMAP],
    ),
    ChartType.HEXBIN: ChartTypeInfo(
        display_name="Hexbin density",
        priority=3,
        alternatives=[ChartType.SCATTER, ChartType.HEATMAP],
    ),
    ChartType.HEATMAP: ChartTypeInfo(
        display_name="Density heatmap",
        priority=3,
        alternatives=[ChartType.HEXBIN, ChartType.SCATTER],
    ),
    ChartType.TABLE: ChartTypeInfo(display_name="Table", priority=4),
}


CHART_TAG_INFO: dict[ChartTag, ChartTagInfo] = {
    ChartTag.COMPARISON: ChartTagInfo(
        display_name="Comparison",
        description="Compare a measure across categories",
    ),
    ChartTag.TREND: ChartTagInfo(
        display_name="Trend",
        description="Show how a measure changes over time",
    ),
    ChartTag.CORRELATION: ChartTagInfo(
        display_name="Correlation",
        description="Explore the relationship between two measures",
    ),
    ChartTag.DISTRIBUTION: ChartTagInfo(
        display_name="Distribution",
        description="See where values concentrate",
    ),
}


# Chart types whose X axis must be a continuous measure
SCATTER_LIKE_TYPES = frozenset({ChartType.SCATTER, ChartType.HEXBIN, ChartType.HEATMAP})

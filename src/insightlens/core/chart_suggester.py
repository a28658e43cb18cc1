"""
Chart suggestion engine for InsightLens.

This module recommends chart encodings for an insight from the statistics
of its columns. Columns are bucketed by role, candidate axis assignments are
scored per chart type and the accepted suggestions are ranked. A seeded
generator adds reproducible variety between near-tied candidates.
"""

from collections.abc import Callable, Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Union

from insightlens.config.logging_config import get_logger
from insightlens.config.settings import Settings, get_settings
from insightlens.core.date_transforms import transform_for_column
from insightlens.core.encoding_criteria import (
    has_numerical_variance,
    is_blocked_column,
    is_suitable_categorical_x_axis,
    is_suitable_color_column,
)
from insightlens.core.seeded_random import SeededRandom, shuffle_with_seed
from insightlens.core.suggestion_scoring import (
    ColumnTableMap,
    annotate_new_fields,
    pick_candidate,
    rank_suggestions,
    score_pairs,
    score_triples,
)
from insightlens.models.column import (
    SCATTER_MAX_POINTS,
    ColumnAnalysis,
    ColumnSemantic,
    DateAnalysis,
)
from insightlens.models.insight import DataField, Insight
from insightlens.models.visualization import (
    CHART_TAG_INFO,
    CHART_TYPE_INFO,
    AxisType,
    ChartEncoding,
    ChartSuggestion,
    ChartTag,
    ChartType,
    TagSuggestion,
)
from insightlens.utils.validators import validate_chart_tag, validate_chart_type

logger = get_logger("chart_suggester")

# Comparison switches to horizontal bars when every category axis is this busy
HORIZONTAL_BAR_MIN_CARDINALITY = 10

FieldLookup = Mapping[str, DataField]


@dataclass
class ColumnBuckets:
    """Columns grouped by the chart role they can play."""

    numerical: list[ColumnAnalysis] = field(default_factory=list)
    temporal: list[ColumnAnalysis] = field(default_factory=list)
    categorical: list[ColumnAnalysis] = field(default_factory=list)
    color_suitable: list[ColumnAnalysis] = field(default_factory=list)

    def summary(self) -> dict[str, list[str]]:
        return {
            "numerical": [c.column_name for c in self.numerical],
            "temporal": [c.column_name for c in self.temporal],
            "categorical": [c.column_name for c in self.categorical],
            "color_suitable": [c.column_name for c in self.color_suitable],
        }


def lookup_field(col: ColumnAnalysis, fields: FieldLookup | None) -> DataField | None:
    """Field metadata for a column, by field id first then by column name."""
    if not fields:
        return None
    if col.field_id and col.field_id in fields:
        return fields[col.field_id]
    return fields.get(col.column_name)


def axis_type_for(col: ColumnAnalysis) -> AxisType:
    if col.semantic == ColumnSemantic.NUMERICAL:
        return AxisType.QUANTITATIVE
    if col.semantic == ColumnSemantic.TEMPORAL or isinstance(col, DateAnalysis):
        return AxisType.TEMPORAL
    return AxisType.NOMINAL


def bucket_columns(
    columns: Iterable[ColumnAnalysis],
    fields: FieldLookup | None = None,
    row_count: int | None = None,
    rng: SeededRandom | None = None,
) -> ColumnBuckets:
    """
    Partition columns into chart-role buckets.

    Blocked columns never enter a bucket. When a generator is given each
    bucket is shuffled with it, in the order numerical, temporal,
    categorical, color.

    Args:
        columns: Merged column analyses
        fields: Field metadata keyed by field id or column name
        row_count: Total row count, used for null and zero ratios
        rng: Optional seeded generator for shuffling

    Returns:
        ColumnBuckets
    """
    buckets = ColumnBuckets()

    for col in columns:
        if not is_blocked_column(col, lookup_field(col, fields), row_count).good:
            continue

        if col.semantic == ColumnSemantic.NUMERICAL:
            if has_numerical_variance(col, row_count).good:
                buckets.numerical.append(col)
        elif col.semantic == ColumnSemantic.TEMPORAL or isinstance(col, DateAnalysis):
            buckets.temporal.append(col)
        elif col.is_dimension:
            if is_suitable_categorical_x_axis(col):
                buckets.categorical.append(col)
            if is_suitable_color_column(col):
                buckets.color_suitable.append(col)

    if rng is not None:
        buckets.numerical = shuffle_with_seed(buckets.numerical, rng)
        buckets.temporal = shuffle_with_seed(buckets.temporal, rng)
        buckets.categorical = shuffle_with_seed(buckets.categorical, rng)
        buckets.color_suitable = shuffle_with_seed(buckets.color_suitable, rng)

    return buckets


def _measure(col: ColumnAnalysis) -> str:
    return f"sum({col.column_name})"


def build_bar(x_col: ColumnAnalysis, y_col: ColumnAnalysis) -> ChartSuggestion:
    """Vertical bar: category on X, summed measure on Y."""
    return ChartSuggestion(
        id=f"bar-{x_col.column_name}-{y_col.column_name}",
        title=f"{y_col.column_name} by {x_col.column_name}",
        chart_type=ChartType.BAR,
        encoding=ChartEncoding(
            x=x_col.column_name,
            y=_measure(y_col),
            x_type=axis_type_for(x_col),
            y_type=AxisType.QUANTITATIVE,
        ),
        rationale="Categorical dimension with numeric measure",
        x_transform=transform_for_column(x_col),
    )


def build_horizontal_bar(
    category_col: ColumnAnalysis,
    value_col: ColumnAnalysis,
) -> ChartSuggestion:
    """Horizontal bar: summed measure on X, category on Y."""
    return ChartSuggestion(
        id=f"bar_horizontal-{category_col.column_name}-{value_col.column_name}",
        title=f"{value_col.column_name} by {category_col.column_name}",
        chart_type=ChartType.BAR_HORIZONTAL,
        encoding=ChartEncoding(
            x=_measure(value_col),
            y=category_col.column_name,
            x_type=AxisType.QUANTITATIVE,
            y_type=axis_type_for(category_col),
        ),
        rationale="Many categories read better as horizontal bars",
        y_transform=transform_for_column(category_col),
    )


def build_line(
    x_col: ColumnAnalysis,
    y_col: ColumnAnalysis,
    chart_type: ChartType = ChartType.LINE,
) -> ChartSuggestion:
    """Line or area chart over a time (or continuous) X axis."""
    x_transform = transform_for_column(x_col)
    if chart_type == ChartType.AREA:
        title = f"{y_col.column_name} trend"
        rationale = "Cumulative trend visualization over time"
    elif x_transform is not None:
        title = f"{y_col.column_name} over time"
        rationale = "Time series data aggregated by date"
    else:
        title = f"{y_col.column_name} by {x_col.column_name}"
        rationale = "Numeric measure along a continuous axis"

    return ChartSuggestion(
        id=f"{chart_type.value}-{x_col.column_name}-{y_col.column_name}",
        title=title,
        chart_type=chart_type,
        encoding=ChartEncoding(
            x=x_col.column_name,
            y=_measure(y_col),
            x_type=axis_type_for(x_col),
            y_type=AxisType.QUANTITATIVE,
        ),
        rationale=rationale,
        x_transform=x_transform,
    )


def build_scatter(
    x_col: ColumnAnalysis,
    y_col: ColumnAnalysis,
    chart_type: ChartType = ChartType.SCATTER,
    large: bool = False,
) -> ChartSuggestion:
    """Point or density chart of two raw measures."""
    if chart_type == ChartType.SCATTER:
        rationale = "Two numeric dimensions for correlation"
    elif large:
        rationale = "Density plot of two numeric dimensions for a large dataset"
    else:
        rationale = "Density of two numeric dimensions"

    return ChartSuggestion(
        id=f"{chart_type.value}-{x_col.column_name}-{y_col.column_name}",
        title=f"{y_col.column_name} vs {x_col.column_name}",
        chart_type=chart_type,
        encoding=ChartEncoding(
            x=x_col.column_name,
            y=y_col.column_name,
            x_type=AxisType.QUANTITATIVE,
            y_type=AxisType.QUANTITATIVE,
        ),
        rationale=rationale,
    )


def build_grouped_bar(
    x_col: ColumnAnalysis,
    color_col: ColumnAnalysis,
    y_col: ColumnAnalysis,
) -> ChartSuggestion:
    """Bar chart split by a color dimension."""
    return ChartSuggestion(
        id=f"bar-grouped-{x_col.column_name}-{color_col.column_name}-{y_col.column_name}",
        title=f"{y_col.column_name} by {x_col.column_name} and {color_col.column_name}",
        chart_type=ChartType.BAR,
        encoding=ChartEncoding(
            x=x_col.column_name,
            y=_measure(y_col),
            x_type=axis_type_for(x_col),
            y_type=AxisType.QUANTITATIVE,
            color=color_col.column_name,
        ),
        rationale="Multi-dimensional categorical comparison",
        x_transform=transform_for_column(x_col),
    )


def build_table(
    dimension: ColumnAnalysis | None,
    measure: ColumnAnalysis | None,
) -> ChartSuggestion | None:
    if dimension is None and measure is None:
        return None
    parts = [col.column_name for col in (dimension, measure) if col is not None]
    return ChartSuggestion(
        id="table-" + "-".join(parts),
        title=" by ".join(reversed(parts)),
        chart_type=ChartType.TABLE,
        encoding=ChartEncoding(
            x=dimension.column_name if dimension else None,
            y=_measure(measure) if measure else None,
            x_type=axis_type_for(dimension) if dimension else None,
            y_type=AxisType.QUANTITATIVE if measure else None,
        ),
        rationale="Tabular view of the aggregated values",
    )


class _SuggestionCollector:
    """Accepts suggestions while rejecting duplicate and excluded encodings."""

    def __init__(self, exclude_encodings: Collection[str] | None = None) -> None:
        self.exclude_encodings = exclude_encodings or set()
        self.used_signatures: set[str] = set()
        self.suggestions: list[ChartSuggestion] = []

    def add(self, suggestion: ChartSuggestion) -> bool:
        signature = suggestion.signature
        if signature in self.exclude_encodings or signature in self.used_signatures:
            return False
        self.used_signatures.add(signature)
        self.suggestions.append(suggestion)
        return True

    def has_chart_type(self, chart_type: ChartType) -> bool:
        return any(s.chart_type == chart_type for s in self.suggestions)

    def add_best(self, scored: Sequence, build: Callable, rng: SeededRandom | None) -> bool:
        """
        Add the weighted pick of a scored candidate list.

        When the pick is a duplicate or excluded the remaining candidates are
        tried best first.
        """
        picked = pick_candidate(scored, rng)
        if picked is None:
            return False
        if self.add(build(picked)):
            return True
        for candidate in scored:
            if candidate is not picked and self.add(build(candidate)):
                return True
        return False


class ChartSuggester:
    """
    Heuristic chart recommendation engine.

    Suggestions depend only on the inputs and the seed: the same call with
    the same seed always returns the same ranked list.

    Attributes:
        settings: Settings providing the default limit, seed and scatter ceiling
        scatter_max_points: Row count above which scatter becomes hexbin
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """
        Initialize the chart suggester.

        Args:
            settings: Settings to use (loaded from the environment if not provided)
        """
        self.settings = settings or get_settings()
        self.scatter_max_points = self.settings.scatter_max_points

        logger.info("ChartSuggester initialized")

    def _existing_fields(
        self,
        insight: Insight,
        fields: FieldLookup | None,
        existing_fields: Iterable[str] | None,
    ) -> set[str]:
        """Existing column names, defaulting to the insight's selected fields."""
        if existing_fields is not None:
            return set(existing_fields)
        if not fields:
            return set()
        by_id = {f.id: f for f in fields.values()}
        return {
            by_id[field_id].column_name
            for field_id in insight.selected_fields
            if field_id in by_id and by_id[field_id].column_name
        }

    def suggest_charts(
        self,
        insight: Insight,
        columns: Sequence[ColumnAnalysis],
        row_count: int,
        fields: FieldLookup | None = None,
        *,
        limit: int | None = None,
        column_table_map: ColumnTableMap | None = None,
        seed: int | None = None,
        exclude_chart_types: Iterable[Union[ChartType, str]] = (),
        existing_fields: Iterable[str] | None = None,
        exclude_encodings: Collection[str] | None = None,
    ) -> list[ChartSuggestion]:
        """
        Suggest charts for an insight.

        Args:
            insight: Insight the charts are for
            columns: Merged column analyses of the insight's tables
            row_count: Total row count
            fields: Field metadata keyed by field id
            limit: Maximum suggestions (defaults to settings)
            column_table_map: Column name to source table ids
            seed: Seed for reproducible variety (defaults to settings)
            exclude_chart_types: Chart types already created
            existing_fields: Column names already selected (defaults to the
                insight's selected fields)
            exclude_encodings: ``x|y|color`` signatures already created

        Returns:
            Ranked suggestions, possibly empty
        """
        limit = self.settings.suggestion_limit if limit is None else limit
        seed = self.settings.suggestion_seed if seed is None else seed
        excluded_types = {validate_chart_type(t) for t in exclude_chart_types}
        existing = self._existing_fields(insight, fields, existing_fields)

        rng = SeededRandom(seed)
        buckets = bucket_columns(columns, fields, row_count, rng)
        logger.debug(
            f"Column buckets for insight {insight.id} "
            f"({len(columns)} columns): {buckets.summary()}"
        )

        collector = _SuggestionCollector(exclude_encodings)

        # Bar: category x measure
        if buckets.categorical and buckets.numerical:
            collector.add_best(
                score_pairs(
                    buckets.categorical,
                    buckets.numerical,
                    column_table_map,
                    prefer_metric_second=True,
                ),
                lambda c: build_bar(c.first, c.second),
                rng,
            )

        temporal_pairs = []
        if buckets.temporal and buckets.numerical:
            temporal_pairs = score_pairs(
                buckets.temporal,
                buckets.numerical,
                column_table_map,
                prefer_metric_second=True,
            )

        # Line: time x measure
        if temporal_pairs:
            collector.add_best(
                temporal_pairs,
                lambda c: build_line(c.first, c.second),
                rng,
            )

        # Scatter: measure x measure, density above the point ceiling
        if len(buckets.numerical) >= 2:
            large = row_count > self.scatter_max_points
            scatter_type = ChartType.HEXBIN if large else ChartType.SCATTER
            collector.add_best(
                score_pairs(
                    buckets.numerical,
                    buckets.numerical,
                    column_table_map,
                    disallow_same=True,
                ),
                lambda c: build_scatter(c.first, c.second, scatter_type, large),
                rng,
            )

        # Area only stands in for a missing line
        if temporal_pairs and not collector.has_chart_type(ChartType.LINE):
            collector.add_best(
                temporal_pairs,
                lambda c: build_line(c.first, c.second, ChartType.AREA),
                rng,
            )

        # Grouped bar: category x color x measure
        if buckets.categorical and buckets.color_suitable and buckets.numerical:
            collector.add_best(
                score_triples(
                    buckets.categorical,
                    buckets.color_suitable,
                    buckets.numerical,
                    column_table_map,
                ),
                lambda c: build_grouped_bar(c.x, c.color, c.y),
                rng,
            )

        candidates = [
            s for s in collector.suggestions if s.chart_type not in excluded_types
        ]
        ranked = rank_suggestions(
            candidates,
            column_table_map,
            total_tables=insight.table_count,
            existing_fields=existing,
        )
        result = [annotate_new_fields(s, existing) for s in ranked[:limit]]

        logger.info(
            f"Generated {len(result)} chart suggestions for insight {insight.id} "
            f"({len(collector.suggestions)} candidates)"
        )
        return result

    def suggest_by_chart_type(
        self,
        insight: Insight,
        columns: Sequence[ColumnAnalysis],
        row_count: int,
        fields: FieldLookup | None = None,
        chart_type: Union[ChartType, str] = ChartType.BAR,
        *,
        tag_context: Union[ChartTag, str, None] = None,
        column_table_map: ColumnTableMap | None = None,
        seed: int | None = None,
        existing_fields: Iterable[str] | None = None,
        exclude_encodings: Collection[str] | None = None,
    ) -> ChartSuggestion | None:
        """
        Suggest the best encoding for one chart type.

        Args:
            insight: Insight the chart is for
            columns: Merged column analyses
            row_count: Total row count
            fields: Field metadata keyed by field id
            chart_type: Chart type to build
            tag_context: Analytical intent steering axis choice; a trend
                context lets bars use a time axis and lines use a
                continuous one
            column_table_map: Column name to source table ids
            seed: Seed for reproducible variety
            existing_fields: Column names already selected
            exclude_encodings: ``x|y|color`` signatures already created

        Returns:
            A suggestion, or None when the data cannot support the chart type

        Raises:
            ChartSuggestionError: If the chart type or tag is unknown
        """
        chart_type = validate_chart_type(chart_type)
        tag = validate_chart_tag(tag_context) if tag_context is not None else None
        seed = self.settings.suggestion_seed if seed is None else seed

        rng = SeededRandom(seed)
        buckets = bucket_columns(columns, fields, row_count, rng)
        collector = _SuggestionCollector(exclude_encodings)

        def measure_pairs(first: Sequence[ColumnAnalysis]):
            return score_pairs(
                first, buckets.numerical, column_table_map, prefer_metric_second=True
            )

        if chart_type in (ChartType.BAR, ChartType.BAR_HORIZONTAL):
            if tag == ChartTag.TREND and buckets.temporal:
                axis = buckets.temporal
            else:
                axis = buckets.categorical or buckets.temporal
            builder = build_bar if chart_type == ChartType.BAR else build_horizontal_bar
            collector.add_best(
                measure_pairs(axis), lambda c: builder(c.first, c.second), rng
            )

        elif chart_type in (ChartType.LINE, ChartType.AREA):
            if buckets.temporal:
                scored = measure_pairs(buckets.temporal)
            elif tag == ChartTag.TREND and len(buckets.numerical) >= 2:
                scored = score_pairs(
                    buckets.numerical,
                    buckets.numerical,
                    column_table_map,
                    disallow_same=True,
                    prefer_metric_second=True,
                )
            else:
                scored = []
            collector.add_best(
                scored, lambda c: build_line(c.first, c.second, chart_type), rng
            )

        elif chart_type == ChartType.SCATTER:
            if row_count <= self.scatter_max_points and len(buckets.numerical) >= 2:
                collector.add_best(
                    score_pairs(
                        buckets.numerical,
                        buckets.numerical,
                        column_table_map,
                        disallow_same=True,
                    ),
                    lambda c: build_scatter(c.first, c.second),
                    rng,
                )

        elif chart_type in (ChartType.HEXBIN, ChartType.HEATMAP):
            large = row_count > self.scatter_max_points
            collector.add_best(
                score_pairs(
                    buckets.numerical,
                    buckets.numerical,
                    column_table_map,
                    disallow_same=True,
                ),
                lambda c: build_scatter(c.first, c.second, chart_type, large),
                rng,
            )

        elif chart_type == ChartType.TABLE:
            dimensions = buckets.categorical or buckets.temporal
            suggestion = build_table(
                dimensions[0] if dimensions else None,
                buckets.numerical[0] if buckets.numerical else None,
            )
            if suggestion is not None:
                collector.add(suggestion)

        if not collector.suggestions:
            logger.debug(f"No {chart_type.value} suggestion for insight {insight.id}")
            return None

        existing = self._existing_fields(insight, fields, existing_fields)
        return annotate_new_fields(collector.suggestions[0], existing)

    def suggest_for_all_chart_types(
        self,
        insight: Insight,
        columns: Sequence[ColumnAnalysis],
        row_count: int,
        fields: FieldLookup | None = None,
        chart_types: Iterable[Union[ChartType, str]] | None = None,
        **kwargs,
    ) -> dict[ChartType, ChartSuggestion | None]:
        """
        Suggest one encoding per chart type.

        Args:
            chart_types: Chart types to build (defaults to every chart type)
            **kwargs: Passed to suggest_by_chart_type

        Returns:
            Mapping of chart type to suggestion, None where unsupported
        """
        if chart_types is None:
            chart_types = list(ChartType)

        results: dict[ChartType, ChartSuggestion | None] = {}
        for chart_type in chart_types:
            chart_type = validate_chart_type(chart_type)
            results[chart_type] = self.suggest_by_chart_type(
                insight, columns, row_count, fields, chart_type, **kwargs
            )
        return results

    @staticmethod
    def select_best_chart_type_for_tag(
        tag: Union[ChartTag, str],
        buckets: ColumnBuckets,
        row_count: int,
        scatter_max_points: int = SCATTER_MAX_POINTS,
    ) -> ChartType | None:
        """
        Pick the chart type that best serves an analytical intent.

        - comparison: bar, horizontal when every category axis has more than
          10 values
        - trend: line over a time axis, or a continuous one when two or more
          measures exist; never over unordered categories
        - correlation: scatter, hexbin above the point ceiling
        - distribution: hexbin

        Returns:
            Chart type, or None when the data cannot serve the intent
        """
        tag = validate_chart_tag(tag)
        numerical = buckets.numerical

        if tag == ChartTag.COMPARISON:
            if not buckets.categorical or not numerical:
                return None
            if all(
                c.cardinality > HORIZONTAL_BAR_MIN_CARDINALITY
                for c in buckets.categorical
            ):
                return ChartType.BAR_HORIZONTAL
            return ChartType.BAR

        if tag == ChartTag.TREND:
            if numerical and buckets.temporal:
                return ChartType.LINE
            if len(numerical) >= 2:
                return ChartType.LINE
            return None

        if len(numerical) < 2:
            return None

        if tag == ChartTag.CORRELATION:
            if row_count > scatter_max_points:
                return ChartType.HEXBIN
            return ChartType.SCATTER

        return ChartType.HEXBIN

    def suggest_by_tag(
        self,
        insight: Insight,
        columns: Sequence[ColumnAnalysis],
        row_count: int,
        fields: FieldLookup | None = None,
        *,
        tags: Iterable[Union[ChartTag, str]] | None = None,
        column_table_map: ColumnTableMap | None = None,
        seed: int | None = None,
        existing_fields: Iterable[str] | None = None,
        exclude_encodings: Collection[str] | None = None,
    ) -> list[TagSuggestion]:
        """
        Suggest one chart per analytical intent.

        Intents the data cannot serve are left out rather than filled with
        a weaker chart.

        Args:
            tags: Intents to cover (defaults to every intent, in order)

        Returns:
            Tag suggestions in intent order
        """
        if tags is None:
            tags = list(ChartTag)
        tags = [validate_chart_tag(t) for t in tags]
        buckets = bucket_columns(columns, fields, row_count)

        results: list[TagSuggestion] = []
        for tag in tags:
            chart_type = self.select_best_chart_type_for_tag(
                tag, buckets, row_count, self.scatter_max_points
            )
            if chart_type is None:
                logger.debug(f"No chart type serves tag {tag.value}")
                continue

            suggestion = self.suggest_by_chart_type(
                insight,
                columns,
                row_count,
                fields,
                chart_type,
                tag_context=tag,
                column_table_map=column_table_map,
                seed=seed,
                existing_fields=existing_fields,
                exclude_encodings=exclude_encodings,
            )
            if suggestion is None:
                continue

            tag_info = CHART_TAG_INFO[tag]
            results.append(
                TagSuggestion(
                    **suggestion.model_dump(),
                    tag=tag,
                    tag_display_name=tag_info.display_name,
                    tag_description=tag_info.description,
                    chart_display_name=CHART_TYPE_INFO[chart_type].display_name,
                )
            )

        logger.info(f"Generated {len(results)} tag suggestions for insight {insight.id}")
        return results

    def get_chart_type_unavailable_reason(
        self,
        chart_type: Union[ChartType, str],
        columns: Sequence[ColumnAnalysis],
        fields: FieldLookup | None = None,
        row_count: int | None = None,
    ) -> str | None:
        """
        Explain why the data cannot support a chart type.

        Returns:
            A short reason, or None when the chart type is available
        """
        chart_type = validate_chart_type(chart_type)
        buckets = bucket_columns(columns, fields, row_count)

        if chart_type in (ChartType.LINE, ChartType.AREA):
            if not buckets.temporal:
                return "Requires date column"
            if not buckets.numerical:
                return "Requires numeric column"
            return None

        if chart_type in (ChartType.SCATTER, ChartType.HEXBIN, ChartType.HEATMAP):
            if len(buckets.numerical) < 2:
                return "Requires 2+ numeric columns"
            return None

        if chart_type in (ChartType.BAR, ChartType.BAR_HORIZONTAL):
            if not buckets.categorical and not buckets.temporal:
                return "Requires category column"
            if not buckets.numerical:
                return "Requires numeric column"
            return None

        if not (buckets.categorical or buckets.temporal or buckets.numerical):
            return "Requires at least one chartable column"
        return None

    @staticmethod
    def get_alternative_chart_types(chart_type: Union[ChartType, str]) -> list[ChartType]:
        """Chart types that can show the same encoding differently."""
        return list(CHART_TYPE_INFO[validate_chart_type(chart_type)].alternatives)

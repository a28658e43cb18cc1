"""
Scoring and ranking for chart suggestions.

Candidates are scored on how many source tables they touch, how much the
value column looks like a real measure, data completeness and cardinality
sweet spots. Final suggestions are ranked with a fixed key order.
"""

import re
from collections.abc import Collection, Iterable, Mapping, Sequence
from dataclasses import dataclass

from insightlens.core.seeded_random import SeededRandom, weighted_top_pick
from insightlens.models.column import ColumnAnalysis
from insightlens.models.visualization import CHART_TYPE_INFO, ChartSuggestion

ColumnTableMap = Mapping[str, Sequence[str]]

# Weight of the metric-likelihood score relative to the other bonuses
METRIC_SCORE_WEIGHT = 100
FILL_RATE_WEIGHT = 5
TOP_CANDIDATES = 5
DOMINANT_COLOR_RATIO = 0.7

# Ordered best-first; the first match wins
METRIC_PATTERNS: list[tuple[re.Pattern, int]] = [
    (
        re.compile(
            r"^(total|sum|count|amount|revenue|sales|profit|cost|price|value|qty|quantity)$"
        ),
        10,
    ),
    (
        re.compile(
            r"(total|sum|count|amount|revenue|sales|profit|cost|price|value|qty|quantity)$"
        ),
        8,
    ),
    (re.compile(r"^(avg|average|mean|rate|ratio|percent|pct|score)$"), 8),
    (re.compile(r"(avg|average|mean|rate|ratio|percent|pct|score)$"), 6),
    (re.compile(r"(spend|spent|income|expense|fee|charge|balance|budget)$"), 6),
    (re.compile(r"(duration|time|hours|minutes|seconds|days|weeks|months)$"), 5),
    (re.compile(r"(size|length|width|height|weight|distance)$"), 4),
    (re.compile(r"^(n|num|number|val)$"), 2),
]

# Names that look like ids, codes or internal columns are never measures
NON_METRIC_PATTERNS: list[re.Pattern] = [
    re.compile(r"id$"),
    re.compile(r"key$"),
    re.compile(r"code$"),
    re.compile(r"no$"),
    re.compile(r"num$"),
    re.compile(r"index$"),
    re.compile(r"seq$"),
    re.compile(r"^_"),
]

AGGREGATE_REFERENCE = re.compile(
    r"^(?:sum|avg|count|min|max|count_distinct)\((.+)\)$", re.IGNORECASE
)
FIELD_REFERENCE = re.compile(
    r"^(?:sum|avg|count|min|max|count_distinct|dateMonth|dateYear|dateDay)\(([^)]+)\)$",
    re.IGNORECASE,
)


def get_metric_score(column_name: str) -> int:
    """
    Score how likely a column is a meaningful measure.

    Returns 0 for id-like names, which disqualifies them as a value axis,
    and 1 for names matching no known pattern.
    """
    name = column_name.lower()

    if any(pattern.search(name) for pattern in NON_METRIC_PATTERNS):
        return 0

    for pattern, score in METRIC_PATTERNS:
        if pattern.search(name):
            return score

    return 1


def normalize_column_reference(value: str | None) -> str | None:
    """Strip an aggregate wrapper: ``sum(amount)`` -> ``amount``."""
    if not value:
        return None
    match = AGGREGATE_REFERENCE.match(value)
    if match:
        return match.group(1)
    return value


def coverage_score(
    columns: Iterable[str | None],
    column_table_map: ColumnTableMap | None = None,
) -> int:
    """Number of distinct source tables touched by the given columns."""
    if not column_table_map:
        return 0
    tables: set[str] = set()
    for col in columns:
        normalized = normalize_column_reference(col)
        if normalized:
            tables.update(column_table_map.get(normalized, ()))
    return len(tables)


def fill_rate(col: ColumnAnalysis) -> float:
    """Share of non-null values, estimated from cardinality and null count."""
    return 1 - col.null_count / max(col.cardinality + col.null_count, 1)


def x_cardinality_bonus(cardinality: int) -> int:
    if 3 <= cardinality <= 20:
        return 10
    if 2 <= cardinality <= 30:
        return 5
    return 0


def color_cardinality_bonus(cardinality: int) -> int:
    if cardinality <= 5:
        return 20
    if cardinality <= 10:
        return 10
    return 0


def is_dominated_color(col: ColumnAnalysis) -> bool:
    """
    Check if one value dominates a color column.

    An unknown distribution counts as dominated.
    """
    ratio = col.dominant_value_ratio()
    return ratio is None or ratio > DOMINANT_COLOR_RATIO


@dataclass
class ScoredPair:
    first: ColumnAnalysis
    second: ColumnAnalysis
    score: float


@dataclass
class ScoredTriple:
    x: ColumnAnalysis
    color: ColumnAnalysis
    y: ColumnAnalysis
    score: float


def score_pairs(
    first: Sequence[ColumnAnalysis],
    second: Sequence[ColumnAnalysis],
    column_table_map: ColumnTableMap | None = None,
    disallow_same: bool = False,
    prefer_metric_second: bool = False,
) -> list[ScoredPair]:
    """
    Score every (first, second) candidate pair, best first.

    Args:
        first: Candidates for the first slot (usually the X axis)
        second: Candidates for the second slot (usually the value axis)
        column_table_map: Column name to source table ids
        disallow_same: Skip pairs using the same column twice
        prefer_metric_second: Weight the second column's metric score and
            drop id-like second columns

    Returns:
        Scored pairs sorted by descending score, ties in input order
    """
    scored: list[ScoredPair] = []

    for a in first:
        for b in second:
            if disallow_same and a.column_name == b.column_name:
                continue

            score: float = coverage_score([a.column_name, b.column_name], column_table_map)

            if prefer_metric_second:
                metric_score = get_metric_score(b.column_name)
                if metric_score == 0:
                    continue
                score += metric_score * METRIC_SCORE_WEIGHT

            score += (fill_rate(a) + fill_rate(b)) * FILL_RATE_WEIGHT
            score += x_cardinality_bonus(a.cardinality)

            scored.append(ScoredPair(a, b, score))

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored


def score_triples(
    x_columns: Sequence[ColumnAnalysis],
    color_columns: Sequence[ColumnAnalysis],
    value_columns: Sequence[ColumnAnalysis],
    column_table_map: ColumnTableMap | None = None,
) -> list[ScoredTriple]:
    """Score (x, color, value) candidates for grouped bars, best first."""
    scored: list[ScoredTriple] = []

    for x_col in x_columns:
        for color_col in color_columns:
            if color_col.column_name == x_col.column_name:
                continue
            if is_dominated_color(color_col):
                continue
            for y_col in value_columns:
                metric_score = get_metric_score(y_col.column_name)
                if metric_score == 0:
                    continue

                score: float = coverage_score(
                    [x_col.column_name, color_col.column_name, y_col.column_name],
                    column_table_map,
                )
                score += metric_score * METRIC_SCORE_WEIGHT
                score += (fill_rate(x_col) + fill_rate(y_col)) * FILL_RATE_WEIGHT
                score += x_cardinality_bonus(x_col.cardinality)
                score += color_cardinality_bonus(color_col.cardinality)

                scored.append(ScoredTriple(x_col, color_col, y_col, score))

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored


def pick_candidate(scored, rng: SeededRandom | None = None):
    """Weighted pick among the top candidates of a best-first scored list."""
    return weighted_top_pick(
        [(item, item.score) for item in scored],
        rng=rng,
        top_n=TOP_CANDIDATES,
    )


def fields_from_suggestion(suggestion: ChartSuggestion) -> list[str]:
    """Raw column names used by a suggestion, aggregate and date wrappers removed."""
    fields: list[str] = []
    encoding = suggestion.encoding
    for value in (encoding.x, encoding.y, encoding.color, encoding.size):
        if not value:
            continue
        match = FIELD_REFERENCE.match(value)
        fields.append(match.group(1) if match else value)
    return fields


def tables_used_by_suggestion(
    suggestion: ChartSuggestion,
    column_table_map: ColumnTableMap | None = None,
) -> set[str]:
    tables: set[str] = set()
    if not column_table_map:
        return tables
    encoding = suggestion.encoding
    for value in (encoding.x, encoding.y, encoding.color, encoding.size):
        normalized = normalize_column_reference(value)
        if normalized:
            tables.update(column_table_map.get(normalized, ()))
    return tables


def count_new_fields(
    suggestion: ChartSuggestion,
    existing_fields: Collection[str] | None = None,
) -> int:
    """Columns of a suggestion that are not yet selected. 0 without a selection."""
    if not existing_fields:
        return 0
    return sum(1 for f in fields_from_suggestion(suggestion) if f not in existing_fields)


def rank_suggestions(
    suggestions: Sequence[ChartSuggestion],
    column_table_map: ColumnTableMap | None = None,
    total_tables: int = 1,
    existing_fields: Collection[str] | None = None,
) -> list[ChartSuggestion]:
    """
    Rank suggestions by preference.

    Key order:
        1. Fewer new fields
        2. Touches every joined table (multi-table insights only)
        3. More tables touched
        4. Chart type priority: line/area, bar, scatter-like, table
        5. No color channel

    The sort is stable, so full ties keep their generation order.
    """

    def sort_key(suggestion: ChartSuggestion) -> tuple:
        table_count = len(tables_used_by_suggestion(suggestion, column_table_map))
        uses_all = total_tables > 1 and table_count >= total_tables
        info = CHART_TYPE_INFO.get(suggestion.chart_type)
        priority = info.priority if info else 5
        return (
            count_new_fields(suggestion, existing_fields),
            0 if uses_all else 1,
            -table_count,
            priority,
            1 if suggestion.encoding.color else 0,
        )

    return sorted(suggestions, key=sort_key)


def annotate_new_fields(
    suggestion: ChartSuggestion,
    existing_fields: Collection[str],
) -> ChartSuggestion:
    """Copy of a suggestion with ``new_fields`` and ``uses_existing_fields_only`` set."""
    new_fields = [f for f in fields_from_suggestion(suggestion) if f not in existing_fields]
    return suggestion.model_copy(
        update={
            "new_fields": new_fields or None,
            "uses_existing_fields_only": not new_fields,
        }
    )

"""
Insight aggregation engine.

Turns raw source rows into the grouped preview of an insight: selected fields
act as implicit GROUP BY keys and metrics are computed per group.
"""

import math
import numbers
from collections.abc import Hashable, Mapping, Sequence
from typing import Any

import numpy as np

from insightlens.config.logging_config import get_logger
from insightlens.config.settings import get_settings
from insightlens.models.insight import (
    AggregationType,
    DataField,
    DataTable,
    FilterOperator,
    Insight,
    InsightDataFrame,
    InsightFilter,
    InsightMetric,
    PreviewColumn,
    PreviewResult,
)
from insightlens.utils.validators import RowSet, validate_max_rows, validate_rows

logger = get_logger("aggregation")

# Grouping keys are tuples of str(value) parts; None marks a null part so a
# null group never collides with a non-null value of the same string form.
GroupKey = tuple[str | None, ...]


def is_numeric(value: Any) -> bool:
    """Real numbers only; booleans are not numeric here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def resolve_fields(insight: Insight, table: DataTable) -> list[DataField]:
    """
    Resolve the insight's selected field ids against the table.

    Order follows ``selected_fields``; unknown ids and repeats are dropped.
    """
    by_id = {field.id: field for field in table.fields}
    resolved: list[DataField] = []
    seen: set[str] = set()

    for field_id in insight.selected_fields:
        if field_id in seen:
            continue
        field = by_id.get(field_id)
        if field is None:
            logger.debug(f"Ignoring unknown field id: {field_id}")
            continue
        seen.add(field_id)
        resolved.append(field)

    return resolved


def _compare(value: Any, operator: FilterOperator, target: Any) -> bool:
    if operator == FilterOperator.EQ:
        return value == target
    if operator == FilterOperator.NE:
        return value != target
    if operator == FilterOperator.IN:
        if target is None or isinstance(target, (str, bytes)):
            return False
        try:
            return value in target
        except TypeError:
            return False
    if operator == FilterOperator.CONTAINS:
        if value is None or target is None:
            return False
        if isinstance(value, str):
            return str(target) in value
        try:
            return target in value
        except TypeError:
            return False

    # Ordering comparisons never match nulls or mixed types
    if value is None or target is None:
        return False
    try:
        if operator == FilterOperator.GT:
            return value > target
        if operator == FilterOperator.GTE:
            return value >= target
        if operator == FilterOperator.LT:
            return value < target
        if operator == FilterOperator.LTE:
            return value <= target
    except TypeError:
        return False
    return False


def row_matches(row: Mapping[str, Any], filters: Sequence[InsightFilter]) -> bool:
    """Check a row against every filter (logical AND)."""
    return all(
        _compare(row.get(f.column_name), f.operator, f.value) for f in filters
    )


def apply_filters(
    rows: Sequence[Mapping[str, Any]],
    filters: Sequence[InsightFilter],
) -> Sequence[Mapping[str, Any]]:
    """Keep the rows matching all filters. Without filters the input is returned."""
    if not filters:
        return rows
    kept = [row for row in rows if row_matches(row, filters)]
    logger.debug(f"Filters kept {len(kept)} of {len(rows)} rows")
    return kept


def group_key(row: Mapping[str, Any], fields: Sequence[DataField]) -> GroupKey:
    """
    Composite grouping key of a row.

    Values are compared by their string form, so ``1`` and ``"1"`` share a
    group. Fields without a column and null or missing values contribute the
    null part.
    """
    parts: list[str | None] = []
    for field in fields:
        if not field.column_name:
            parts.append(None)
            continue
        value = row.get(field.column_name)
        parts.append(None if value is None else str(value))
    return tuple(parts)


def group_rows(
    rows: Sequence[Mapping[str, Any]],
    fields: Sequence[DataField],
) -> dict[GroupKey, list[Mapping[str, Any]]]:
    """
    Partition rows by their grouping key, in first-appearance order.

    Without fields every row lands in a single grand-total group, which exists
    even when there are no rows.
    """
    if not fields:
        return {(): list(rows)}

    groups: dict[GroupKey, list[Mapping[str, Any]]] = {}
    for row in rows:
        groups.setdefault(group_key(row, fields), []).append(row)
    return groups


def _distinct_key(value: Any) -> Hashable:
    # True and 1 are equal in Python but count as separate values
    if isinstance(value, bool):
        return (bool, value)
    try:
        hash(value)
    except TypeError:
        return repr(value)
    return value


def compute_metric(metric: InsightMetric, rows: Sequence[Mapping[str, Any]]) -> float:
    """
    Compute one metric over the rows of a group.

    Args:
        metric: Metric definition
        rows: Rows of the group

    Returns:
        The metric value; 0 when nothing can be aggregated
    """
    if metric.aggregation == AggregationType.COUNT:
        return len(rows)

    column = metric.column_name
    if not column:
        return 0

    values = [row.get(column) for row in rows]

    if metric.aggregation == AggregationType.COUNT_DISTINCT:
        return len({_distinct_key(v) for v in values if v is not None})

    if metric.aggregation == AggregationType.SUM:
        return sum(v if is_numeric(v) else 0 for v in values)

    numeric = [v for v in values if is_numeric(v)]
    if not numeric:
        return 0

    if metric.aggregation == AggregationType.AVG:
        return sum(numeric) / len(numeric)
    if metric.aggregation == AggregationType.MIN:
        return min(numeric)
    if metric.aggregation == AggregationType.MAX:
        return max(numeric)

    return 0


def _output_row(
    group: Sequence[Mapping[str, Any]],
    fields: Sequence[DataField],
    metrics: Sequence[InsightMetric],
) -> dict[str, Any]:
    first = group[0] if group else {}
    row: dict[str, Any] = {}

    for field in fields:
        row[field.name] = first.get(field.column_name) if field.column_name else None

    for metric in metrics:
        row[metric.name] = compute_metric(metric, group)

    return row


def compute_insight_preview(
    insight: Insight,
    table: DataTable,
    source_rows: RowSet,
    max_rows: float | None = None,
) -> PreviewResult:
    """
    Compute the grouped preview of an insight.

    Selected fields are the grouping keys and every metric is computed per
    group. With no resolvable fields the result is a single grand-total row.
    Inputs are never modified.

    Args:
        insight: Insight to compute
        table: Table owning the selected fields
        source_rows: Raw rows as mappings or a pandas DataFrame
        max_rows: Maximum groups returned (defaults to settings,
            ``math.inf`` for no cap)

    Returns:
        PreviewResult with the truncated rows and the total group count

    Raises:
        DataValidationError: If the rows or the row cap are invalid
    """
    if max_rows is None:
        max_rows = get_settings().preview_max_rows
    max_rows = validate_max_rows(max_rows)
    rows = validate_rows(source_rows)

    fields = resolve_fields(insight, table)
    metrics = insight.metrics

    filtered = apply_filters(rows, insight.filters)
    groups = group_rows(filtered, fields)

    output = [_output_row(group, fields, metrics) for group in groups.values()]
    sample = output if math.isinf(max_rows) else output[: int(max_rows)]

    logger.debug(
        f"Insight {insight.id}: {len(filtered)} rows -> {len(output)} groups, "
        f"returning {len(sample)}"
    )

    columns = [PreviewColumn(name=field.name, type=field.type) for field in fields]
    columns.extend(PreviewColumn(name=metric.name, type="number") for metric in metrics)

    data_frame = InsightDataFrame(
        field_ids=[field.id for field in fields] + [metric.id for metric in metrics],
        columns=columns,
        rows=sample,
    )

    return PreviewResult(
        data_frame=data_frame,
        row_count=len(output),
        sample_size=len(sample),
    )


def compute_insight_dataframe(
    insight: Insight,
    table: DataTable,
    source_rows: RowSet,
) -> InsightDataFrame:
    """Compute the full, untruncated aggregated rows of an insight."""
    return compute_insight_preview(
        insight, table, source_rows, max_rows=math.inf
    ).data_frame

"""
Unit Tests for Aggregation Module
Tests grouping, metric computation, truncation and filters
"""

import copy
import math

import numpy as np
import pandas as pd
import pytest

from insightlens.core.aggregation import (
    compute_insight_dataframe,
    compute_insight_preview,
    compute_metric,
    group_rows,
    is_numeric,
    resolve_fields,
)
from insightlens.models.insight import (
    AggregationType,
    DataField,
    DataTable,
    FilterOperator,
    Insight,
    InsightFilter,
    InsightMetric,
)
from insightlens.utils.exceptions import DataValidationError


def metric(name, aggregation, column_name=None):
    return InsightMetric(
        id=f"m_{name}",
        name=name,
        column_name=column_name,
        aggregation=aggregation,
    )


class TestGrandTotal:
    """Insights without selected fields produce one row."""

    def test_sum_and_count(self, sales_table):
        rows = [{"sales": 100}, {"sales": 200}, {"sales": 300}]
        insight = Insight(
            id="i",
            name="Totals",
            base_table_id="sales",
            metrics=[
                metric("total", AggregationType.SUM, "sales"),
                metric("n", AggregationType.COUNT),
            ],
        )

        result = compute_insight_preview(insight, sales_table, rows)

        assert result.row_count == 1
        assert result.sample_size == 1
        assert result.data_frame.rows == [{"total": 600, "n": 3}]

    def test_zero_rows_still_one_group(self, sales_table):
        insight = Insight(
            id="i",
            name="Totals",
            base_table_id="sales",
            metrics=[metric("n", AggregationType.COUNT)],
        )
        result = compute_insight_preview(insight, sales_table, [])
        assert result.row_count == 1
        assert result.data_frame.rows == [{"n": 0}]

    def test_unknown_field_ids_fall_back_to_grand_total(self, sales_table, sales_rows):
        insight = Insight(
            id="i",
            name="Totals",
            base_table_id="sales",
            selected_fields=["missing"],
            metrics=[metric("n", AggregationType.COUNT)],
        )
        result = compute_insight_preview(insight, sales_table, sales_rows)
        assert result.row_count == 1
        assert result.data_frame.rows == [{"n": len(sales_rows)}]
        assert result.data_frame.field_ids == ["m_n"]


class TestGrouping:
    """Tests for grouping by selected fields."""

    def test_group_by_one_field(self, sales_table):
        rows = [
            {"category": "A", "sales": 100},
            {"category": "B", "sales": 50},
            {"category": "A", "sales": 150},
        ]
        insight = Insight(
            id="i",
            name="By category",
            base_table_id="sales",
            selected_fields=["f_category"],
            metrics=[metric("total", AggregationType.SUM, "sales")],
        )

        result = compute_insight_preview(insight, sales_table, rows)

        assert result.row_count == 2
        assert sorted(result.data_frame.rows, key=lambda r: r["Category"]) == [
            {"Category": "A", "total": 250},
            {"Category": "B", "total": 50},
        ]

    def test_groups_in_first_appearance_order(self, sales_insight, sales_table, sales_rows):
        result = compute_insight_preview(sales_insight, sales_table, sales_rows)
        assert [r["Category"] for r in result.data_frame.rows] == ["A", "B", "C", None]

    def test_null_and_missing_values_share_one_group(self, sales_table):
        rows = [
            {"category": None, "sales": 1},
            {"sales": 2},
            {"category": "None", "sales": 4},
        ]
        insight = Insight(
            id="i",
            name="Nulls",
            base_table_id="sales",
            selected_fields=["f_category"],
            metrics=[metric("total", AggregationType.SUM, "sales")],
        )

        result = compute_insight_preview(insight, sales_table, rows)

        assert result.row_count == 2
        assert result.data_frame.rows[0] == {"Category": None, "total": 3}
        assert result.data_frame.rows[1] == {"Category": "None", "total": 4}

    def test_string_coercion_collapses_equal_forms(self, sales_table):
        rows = [{"category": 1, "sales": 1}, {"category": "1", "sales": 2}]
        insight = Insight(
            id="i",
            name="Mixed",
            base_table_id="sales",
            selected_fields=["f_category"],
            metrics=[metric("total", AggregationType.SUM, "sales")],
        )
        result = compute_insight_preview(insight, sales_table, rows)
        assert result.row_count == 1
        assert result.data_frame.rows[0] == {"Category": 1, "total": 3}

    def test_field_without_column_groups_as_null(self):
        table = DataTable(
            id="t",
            name="T",
            fields=[DataField(id="f_virtual", name="Virtual", column_name=None)],
        )
        insight = Insight(
            id="i",
            name="Virtual",
            base_table_id="t",
            selected_fields=["f_virtual"],
            metrics=[metric("n", AggregationType.COUNT)],
        )
        result = compute_insight_preview(insight, table, [{"a": 1}, {"a": 2}])
        assert result.data_frame.rows == [{"Virtual": None, "n": 2}]

    def test_duplicate_field_ids_resolved_once(self, sales_table):
        insight = Insight(
            id="i",
            name="Dupes",
            base_table_id="sales",
            selected_fields=["f_region", "missing", "f_region", "f_category"],
        )
        fields = resolve_fields(insight, sales_table)
        assert [f.id for f in fields] == ["f_region", "f_category"]

    def test_multi_field_groups(self, sales_table, sales_rows):
        insight = Insight(
            id="i",
            name="By region and category",
            base_table_id="sales",
            selected_fields=["f_region", "f_category"],
            metrics=[metric("n", AggregationType.COUNT)],
        )
        result = compute_insight_preview(insight, sales_table, sales_rows)
        assert result.row_count == 5
        assert result.data_frame.column_names == ["Region", "Category", "n"]


class TestMetrics:
    """Tests for compute_metric."""

    ROWS = [
        {"v": 10, "s": "x"},
        {"v": 2.5, "s": "y"},
        {"v": "7", "s": "x"},
        {"v": True, "s": None},
        {"v": None},
    ]

    def test_count(self):
        assert compute_metric(metric("n", AggregationType.COUNT), self.ROWS) == 5

    def test_count_ignores_column(self):
        assert compute_metric(metric("n", AggregationType.COUNT, "missing"), self.ROWS) == 5

    def test_count_distinct_skips_nulls(self):
        assert compute_metric(metric("d", AggregationType.COUNT_DISTINCT, "s"), self.ROWS) == 2

    def test_count_distinct_keeps_booleans_apart(self):
        rows = [{"v": True}, {"v": 1}, {"v": False}, {"v": 0}, {"v": 1.0}]
        assert compute_metric(metric("d", AggregationType.COUNT_DISTINCT, "v"), rows) == 4

    def test_sum_numeric_only(self):
        assert compute_metric(metric("t", AggregationType.SUM, "v"), self.ROWS) == 12.5

    def test_avg_min_max_numeric_only(self):
        assert compute_metric(metric("a", AggregationType.AVG, "v"), self.ROWS) == 6.25
        assert compute_metric(metric("lo", AggregationType.MIN, "v"), self.ROWS) == 2.5
        assert compute_metric(metric("hi", AggregationType.MAX, "v"), self.ROWS) == 10

    @pytest.mark.parametrize(
        "aggregation",
        [AggregationType.AVG, AggregationType.MIN, AggregationType.MAX, AggregationType.SUM],
    )
    def test_zero_when_no_numeric_values(self, aggregation):
        rows = [{"v": "a"}, {"v": None}, {"v": False}]
        assert compute_metric(metric("m", aggregation, "v"), rows) == 0

    @pytest.mark.parametrize(
        "aggregation",
        [AggregationType.SUM, AggregationType.AVG, AggregationType.COUNT_DISTINCT],
    )
    def test_missing_column_name_gives_zero(self, aggregation):
        assert compute_metric(metric("m", aggregation), self.ROWS) == 0

    def test_booleans_are_not_numeric(self):
        assert not is_numeric(True)
        assert not is_numeric(np.bool_(True))
        assert is_numeric(np.int64(3))
        assert is_numeric(1.5)
        assert not is_numeric("1")


class TestTruncation:
    """Tests for max_rows handling."""

    @pytest.fixture
    def by_units(self):
        return Insight(
            id="i",
            name="By units",
            base_table_id="sales",
            selected_fields=["f_units"],
            metrics=[metric("n", AggregationType.COUNT)],
        )

    def test_truncates_rows_but_reports_total(self, by_units, sales_table, sales_rows):
        result = compute_insight_preview(by_units, sales_table, sales_rows, max_rows=2)
        assert result.row_count == 5
        assert result.sample_size == 2
        assert len(result.data_frame.rows) == 2
        assert result.is_truncated

    def test_zero_rows_cap(self, by_units, sales_table, sales_rows):
        result = compute_insight_preview(by_units, sales_table, sales_rows, max_rows=0)
        assert result.sample_size == 0
        assert result.row_count == 5
        assert result.data_frame.rows == []

    def test_infinite_cap(self, by_units, sales_table, sales_rows):
        result = compute_insight_preview(by_units, sales_table, sales_rows, max_rows=math.inf)
        assert result.sample_size == result.row_count == 5

    def test_default_cap_from_settings(self, by_units, sales_table):
        rows = [{"units": i} for i in range(80)]
        result = compute_insight_preview(by_units, sales_table, rows)
        assert result.sample_size == 50
        assert result.row_count == 80

    def test_negative_cap_raises(self, by_units, sales_table, sales_rows):
        with pytest.raises(DataValidationError) as exc_info:
            compute_insight_preview(by_units, sales_table, sales_rows, max_rows=-1)
        assert exc_info.value.field == "max_rows"

    def test_dataframe_equals_unbounded_preview(self, sales_insight, sales_table, sales_rows):
        full = compute_insight_dataframe(sales_insight, sales_table, sales_rows)
        preview = compute_insight_preview(
            sales_insight, sales_table, sales_rows, max_rows=math.inf
        )
        assert full.model_dump_json() == preview.data_frame.model_dump_json()


class TestColumnsAndIds:
    """Tests for output column metadata."""

    def test_columns_fields_then_metrics(self, sales_insight, sales_table, sales_rows):
        result = compute_insight_preview(sales_insight, sales_table, sales_rows)
        columns = result.data_frame.columns
        assert [(c.name, c.type) for c in columns] == [
            ("Category", "string"),
            ("total", "number"),
        ]
        assert result.data_frame.field_ids == ["f_category", "m_total"]

    def test_to_pandas_keeps_column_order(self, sales_insight, sales_table, sales_rows):
        result = compute_insight_preview(sales_insight, sales_table, sales_rows)
        df = result.data_frame.to_pandas()
        assert list(df.columns) == ["Category", "total"]
        assert len(df) == 4


class TestInputs:
    """Tests for accepted inputs and purity."""

    def test_inputs_not_mutated(self, sales_insight, sales_table, sales_rows):
        insight_before = sales_insight.model_copy(deep=True)
        table_before = sales_table.model_copy(deep=True)
        rows_before = copy.deepcopy(sales_rows)

        compute_insight_preview(sales_insight, sales_table, sales_rows)

        assert sales_insight == insight_before
        assert sales_table == table_before
        assert sales_rows == rows_before

    def test_dataframe_source_matches_rows(self, sales_insight, sales_table, sales_rows):
        from_rows = compute_insight_preview(sales_insight, sales_table, sales_rows)
        from_df = compute_insight_preview(
            sales_insight, sales_table, pd.DataFrame(sales_rows)
        )
        assert from_df.data_frame.rows == from_rows.data_frame.rows

    def test_nan_cells_group_as_null(self, sales_table):
        df = pd.DataFrame({"category": ["A", np.nan, None], "sales": [1.0, 2.0, 3.0]})
        insight = Insight(
            id="i",
            name="NaN",
            base_table_id="sales",
            selected_fields=["f_category"],
            metrics=[metric("total", AggregationType.SUM, "sales")],
        )
        result = compute_insight_preview(insight, sales_table, df)
        assert result.data_frame.rows == [
            {"Category": "A", "total": 1.0},
            {"Category": None, "total": 5.0},
        ]

    def test_unsupported_source_raises(self, sales_insight, sales_table):
        with pytest.raises(DataValidationError):
            compute_insight_preview(sales_insight, sales_table, "not rows")
        with pytest.raises(DataValidationError):
            compute_insight_preview(sales_insight, sales_table, [1, 2, 3])


class TestFilters:
    """Tests for insight filters applied before grouping."""

    def _insight(self, *filters):
        return Insight(
            id="i",
            name="Filtered",
            base_table_id="sales",
            metrics=[
                metric("n", AggregationType.COUNT),
                metric("total", AggregationType.SUM, "sales"),
            ],
            filters=list(filters),
        )

    def test_equality(self, sales_table, sales_rows):
        insight = self._insight(InsightFilter(column_name="region", value="North"))
        result = compute_insight_preview(insight, sales_table, sales_rows)
        assert result.data_frame.rows == [{"n": 3, "total": 195}]

    def test_combined_filters(self, sales_table, sales_rows):
        insight = self._insight(
            InsightFilter(column_name="region", value="North"),
            InsightFilter(column_name="sales", operator=FilterOperator.GTE, value=75),
        )
        result = compute_insight_preview(insight, sales_table, sales_rows)
        assert result.data_frame.rows == [{"n": 2, "total": 175}]

    def test_in_and_contains(self, sales_table, sales_rows):
        by_in = self._insight(
            InsightFilter(column_name="category", operator=FilterOperator.IN, value=["A", "C"])
        )
        assert compute_insight_preview(by_in, sales_table, sales_rows).data_frame.rows == [
            {"n": 3, "total": 325}
        ]

        by_contains = self._insight(
            InsightFilter(column_name="region", operator=FilterOperator.CONTAINS, value="out")
        )
        assert compute_insight_preview(
            by_contains, sales_table, sales_rows
        ).data_frame.rows == [{"n": 2, "total": 200}]

    def test_in_skips_unhashable_cells(self, sales_table):
        rows = [{"tags": ["a", "b"]}, {"tags": "a"}]
        insight = self._insight(
            InsightFilter(column_name="tags", operator=FilterOperator.IN, value={"a"})
        )
        result = compute_insight_preview(insight, sales_table, rows)
        assert result.data_frame.rows == [{"n": 1, "total": 0}]

    def test_ordering_never_matches_nulls_or_mixed_types(self, sales_table, sales_rows):
        insight = self._insight(
            InsightFilter(column_name="category", operator=FilterOperator.GT, value=0)
        )
        result = compute_insight_preview(insight, sales_table, sales_rows)
        assert result.data_frame.rows == [{"n": 0, "total": 0}]

    def test_group_rows_without_fields(self):
        assert group_rows([], []) == {(): []}

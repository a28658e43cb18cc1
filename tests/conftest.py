"""
Pytest fixtures and configuration for InsightLens tests.
"""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from types import SimpleNamespace
from typing import Any

import pandas as pd
import pytest

from insightlens.config.settings import Settings
from insightlens.models.column import (
    BooleanAnalysis,
    ColumnSemantic,
    DataFrameAnalysis,
    DateAnalysis,
    NumberAnalysis,
    StringAnalysis,
    compute_field_hash,
)
from insightlens.models.insight import (
    AggregationType,
    DataField,
    DataTable,
    Insight,
    InsightJoin,
    InsightMetric,
)

DAY_MS = 24 * 60 * 60 * 1000
JAN_2024_MS = 1_704_067_200_000


# ============================================
# Column Analysis Factories
# ============================================


def make_string_column(column_name: str, **overrides: Any) -> StringAnalysis:
    values = {
        "column_name": column_name,
        "semantic": ColumnSemantic.CATEGORICAL,
        "cardinality": 4,
        "uniqueness": 0.04,
        "null_count": 0,
        "max_frequency_ratio": 0.3,
    }
    values.update(overrides)
    return StringAnalysis(**values)


def make_number_column(column_name: str, **overrides: Any) -> NumberAnalysis:
    values = {
        "column_name": column_name,
        "semantic": ColumnSemantic.NUMERICAL,
        "cardinality": 80,
        "uniqueness": 0.8,
        "null_count": 0,
        "min": 1.0,
        "max": 500.0,
        "zero_count": 0,
    }
    values.update(overrides)
    return NumberAnalysis(**values)


def make_date_column(column_name: str, days: int = 365, **overrides: Any) -> DateAnalysis:
    values = {
        "column_name": column_name,
        "cardinality": min(days, 100),
        "uniqueness": 1.0,
        "min_date": JAN_2024_MS,
        "max_date": JAN_2024_MS + days * DAY_MS,
    }
    values.update(overrides)
    return DateAnalysis(**values)


def make_boolean_column(column_name: str, **overrides: Any) -> BooleanAnalysis:
    values = {
        "column_name": column_name,
        "cardinality": 2,
        "uniqueness": 0.02,
        "true_count": 50,
        "false_count": 50,
    }
    values.update(overrides)
    return BooleanAnalysis(**values)


@pytest.fixture
def col() -> SimpleNamespace:
    """Column analysis factories: col.string(name), col.number(name), ..."""
    return SimpleNamespace(
        string=make_string_column,
        number=make_number_column,
        date=make_date_column,
        boolean=make_boolean_column,
    )


# ============================================
# Configuration Fixtures
# ============================================


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with explicit defaults."""
    return Settings(
        log_level="DEBUG",
        preview_max_rows=50,
        suggestion_limit=3,
        suggestion_seed=0,
        scatter_max_points=5000,
        analysis_cache_size=8,
    )


# ============================================
# Table and Insight Fixtures
# ============================================


@pytest.fixture
def sales_table() -> DataTable:
    """Sales table with a category, a region, a date and two measures."""
    return DataTable(
        id="sales",
        name="Sales",
        fields=[
            DataField(id="f_category", name="Category", column_name="category"),
            DataField(id="f_region", name="Region", column_name="region"),
            DataField(id="f_date", name="Date", column_name="order_date", type="date"),
            DataField(id="f_sales", name="Sales", column_name="sales", type="number"),
            DataField(id="f_units", name="Units", column_name="units", type="number"),
            DataField(
                id="f_order_id",
                name="Order",
                column_name="order_id",
                is_identifier=True,
            ),
        ],
    )


@pytest.fixture
def sales_fields(sales_table: DataTable) -> dict[str, DataField]:
    """Field metadata keyed by field id."""
    return {field.id: field for field in sales_table.fields}


@pytest.fixture
def sales_rows() -> list[dict[str, Any]]:
    """Raw sales rows."""
    return [
        {"category": "A", "region": "North", "sales": 100, "units": 1, "order_id": "o1"},
        {"category": "B", "region": "South", "sales": 50, "units": 2, "order_id": "o2"},
        {"category": "A", "region": "South", "sales": 150, "units": 3, "order_id": "o3"},
        {"category": "C", "region": "North", "sales": 75, "units": 4, "order_id": "o4"},
        {"category": None, "region": "North", "sales": 20, "units": 5, "order_id": "o5"},
    ]


@pytest.fixture
def sales_insight() -> Insight:
    """Insight grouping sales by category."""
    return Insight(
        id="insight-1",
        name="Sales by category",
        base_table_id="sales",
        selected_fields=["f_category"],
        metrics=[
            InsightMetric(
                id="m_total",
                name="total",
                column_name="sales",
                aggregation=AggregationType.SUM,
            ),
        ],
    )


@pytest.fixture
def empty_insight() -> Insight:
    """Insight without fields or metrics."""
    return Insight(id="insight-empty", name="Empty", base_table_id="sales")


@pytest.fixture
def joined_insight() -> Insight:
    """Insight over sales joined with customers."""
    return Insight(
        id="insight-joined",
        name="Sales with customers",
        base_table_id="sales",
        joins=[
            InsightJoin(
                right_table_id="customers",
                left_key="customer_id",
                right_key="id",
            )
        ],
    )


# ============================================
# Column Analysis Fixtures
# ============================================


@pytest.fixture
def sales_columns() -> list:
    """Column analyses matching the sales table."""
    return [
        make_string_column("category", field_id="f_category", cardinality=4),
        make_string_column("region", field_id="f_region", cardinality=3),
        make_date_column("order_date", field_id="f_date"),
        make_number_column("sales", field_id="f_sales"),
        make_number_column("units", field_id="f_units", cardinality=40),
        make_string_column(
            "order_id",
            field_id="f_order_id",
            semantic=ColumnSemantic.IDENTIFIER,
            cardinality=100,
            uniqueness=1.0,
        ),
    ]


@pytest.fixture
def sales_analysis(sales_columns: list) -> DataFrameAnalysis:
    """Analysis of the sales table."""
    return DataFrameAnalysis(
        columns=sales_columns,
        row_count=100,
        field_hash=compute_field_hash(
            ["f_category", "f_region", "f_date", "f_sales", "f_units", "f_order_id"]
        ),
    )


@pytest.fixture
def customer_analysis() -> DataFrameAnalysis:
    """Analysis of a customers table joined to sales."""
    return DataFrameAnalysis(
        columns=[
            make_string_column("segment", cardinality=3),
            make_number_column("lifetime_value"),
            make_string_column("region", cardinality=5),
        ],
        row_count=20,
        field_hash=compute_field_hash(["c_segment", "c_ltv", "c_region"]),
    )


# ============================================
# DataFrame Fixtures
# ============================================


@pytest.fixture
def sales_dataframe(sales_rows: list[dict[str, Any]]) -> pd.DataFrame:
    """Sales rows as a pandas DataFrame (None category becomes NaN-like)."""
    return pd.DataFrame(sales_rows)

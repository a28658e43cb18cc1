"""
Insight data models.

This module defines Pydantic models for tables, fields, insights and the
aggregated preview produced from them.
"""

from enum import Enum
from typing import Any

import pandas as pd
from pydantic import BaseModel, Field


class AggregationType(str, Enum):
    """Supported metric aggregations."""

    SUM = "sum"
    AVG = "avg"
    COUNT = "count"
    MIN = "min"
    MAX = "max"
    COUNT_DISTINCT = "count_distinct"


class JoinType(str, Enum):
    """Join kinds between a base table and a joined table."""

    INNER = "inner"
    LEFT = "left"
    RIGHT = "right"
    FULL = "full"


class FilterOperator(str, Enum):
    """Row filter operators."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    CONTAINS = "contains"
    IN = "in"


class DataField(BaseModel):
    """
    Logical column definition owned by a table.

    Attributes:
        id: Unique identifier
        name: Display name, also the key used in preview rows
        column_name: Physical column backing the field
        type: Declared type ("string", "number", "date", "boolean", ...)
        is_identifier: Marked as an identifier by the user or importer
        is_reference: Marked as a reference to another table
    """

    id: str
    name: str = Field(min_length=1)
    column_name: str | None = None
    type: str = "string"
    is_identifier: bool = False
    is_reference: bool = False


class DataTable(BaseModel):
    """A table definition with its fields."""

    id: str
    name: str
    fields: list[DataField] = Field(default_factory=list)

    def get_field(self, field_id: str) -> DataField | None:
        """Get field by id."""
        for field in self.fields:
            if field.id == field_id:
                return field
        return None


class InsightMetric(BaseModel):
    """
    A named aggregation computed per group.

    Attributes:
        id: Unique identifier
        name: Output column name
        column_name: Column aggregated; absent for count
        aggregation: Aggregation function
    """

    id: str
    name: str = Field(min_length=1)
    column_name: str | None = None
    aggregation: AggregationType

    @property
    def expression(self) -> str:
        """Aggregate expression string such as ``sum(amount)``."""
        return f"{self.aggregation.value}({self.column_name or '*'})"


class InsightJoin(BaseModel):
    """Single-key join between the base table and another table."""

    type: JoinType = JoinType.INNER
    right_table_id: str
    left_key: str
    right_key: str


class InsightFilter(BaseModel):
    """Row predicate applied before grouping."""

    column_name: str
    operator: FilterOperator = FilterOperator.EQ
    value: Any = None


class Insight(BaseModel):
    """
    A grouped and aggregated view over a base table and its joins.

    Attributes:
        id: Unique identifier
        name: Display name
        base_table_id: Table the insight is built on
        selected_fields: Field ids used as grouping keys, in display order
        metrics: Metrics computed per group
        joins: Joined tables
        filters: Row filters
    """

    id: str
    name: str
    base_table_id: str
    selected_fields: list[str] = Field(default_factory=list)
    metrics: list[InsightMetric] = Field(default_factory=list)
    joins: list[InsightJoin] = Field(default_factory=list)
    filters: list[InsightFilter] = Field(default_factory=list)

    @property
    def table_count(self) -> int:
        """Number of tables the insight touches."""
        return 1 + len(self.joins)


class PreviewColumn(BaseModel):
    """Column metadata of an aggregated result."""

    name: str
    type: str


class InsightDataFrame(BaseModel):
    """
    Aggregated rows of an insight.

    Attributes:
        field_ids: Resolved field ids followed by metric ids
        columns: Column metadata, fields first then metrics
        rows: One mapping per group
    """

    field_ids: list[str] = Field(default_factory=list)
    columns: list[PreviewColumn] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    def to_pandas(self) -> pd.DataFrame:
        """Convert to a pandas DataFrame with the declared column order."""
        return pd.DataFrame(self.rows, columns=self.column_names)


class PreviewResult(BaseModel):
    """
    Result of an insight preview.

    Attributes:
        data_frame: Truncated aggregated rows
        row_count: Number of groups before truncation
        sample_size: Number of groups kept
    """

    data_frame: InsightDataFrame
    row_count: int = Field(ge=0)
    sample_size: int = Field(ge=0)

    @property
    def is_truncated(self) -> bool:
        """Whether more groups exist than were returned."""
        return self.sample_size < self.row_count

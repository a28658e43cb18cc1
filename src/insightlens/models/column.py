"""
Column analysis data models.

Column statistics arrive from an external analyzer as a tagged union
discriminated by ``data_type``. Shared suitability logic only reads the base
fields; variance and frequency checks narrow to the specific variant.
"""

import re
from collections.abc import Iterable
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, model_validator


# Cardinality thresholds shared by the classifier, suggestions and warnings
CATEGORICAL_X_MAX = 50
COLOR_MIN = 2
COLOR_MAX = 12
NUMERIC_BAR_X_MAX = 20

# Above this many rows a scatter plot is replaced by a density plot
SCATTER_MAX_POINTS = 5000

MAX_NULL_RATIO = 0.5
MAX_ZERO_RATIO = 0.8


class ColumnDataType(str, Enum):
    """Physical data type reported by the analyzer."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    BOOLEAN = "boolean"
    ARRAY = "array"
    UNKNOWN = "unknown"


class ColumnSemantic(str, Enum):
    """Meaning of a column, independent of its physical type."""

    CATEGORICAL = "categorical"
    NUMERICAL = "numerical"
    TEMPORAL = "temporal"
    BOOLEAN = "boolean"
    IDENTIFIER = "identifier"
    REFERENCE = "reference"
    EMAIL = "email"
    URL = "url"
    UUID = "uuid"
    TEXT = "text"
    UNKNOWN = "unknown"


# Semantics that never make sense on a chart channel
BLOCKED_SEMANTICS = frozenset(
    {
        ColumnSemantic.IDENTIFIER,
        ColumnSemantic.REFERENCE,
        ColumnSemantic.EMAIL,
        ColumnSemantic.URL,
        ColumnSemantic.UUID,
    }
)

# Semantics treated as discrete dimensions
DIMENSION_SEMANTICS = frozenset(
    {
        ColumnSemantic.CATEGORICAL,
        ColumnSemantic.TEXT,
        ColumnSemantic.BOOLEAN,
    }
)


ID_NAME_PATTERNS = [
    re.compile(r"^id$", re.IGNORECASE),
    re.compile(r"_id$", re.IGNORECASE),
    re.compile(r"^id_", re.IGNORECASE),
    re.compile(r"Id$"),  # camelCase: userId
    re.compile(r"^uuid$", re.IGNORECASE),
    re.compile(r"^guid$", re.IGNORECASE),
    re.compile(r"^_?rowindex$", re.IGNORECASE),
    re.compile(r"key$", re.IGNORECASE),
    re.compile(r"code$", re.IGNORECASE),
    re.compile(r"^pk$", re.IGNORECASE),
]

# Names that match the patterns above but hold real dimensions
NOT_ID_PATTERNS = [
    re.compile(r"zipcode$", re.IGNORECASE),
    re.compile(r"postcode$", re.IGNORECASE),
    re.compile(r"areacode$", re.IGNORECASE),
]


def looks_like_identifier(name: str) -> bool:
    """Check whether a column name follows identifier naming conventions."""
    if any(pattern.search(name) for pattern in NOT_ID_PATTERNS):
        return False
    return any(pattern.search(name) for pattern in ID_NAME_PATTERNS)


class EncodingEvaluation(BaseModel):
    """
    Verdict of a suitability check.

    Attributes:
        good: Whether the column suits the channel
        reason: User-facing explanation, only set when ``good`` is False
    """

    good: bool
    reason: str | None = None

    @classmethod
    def ok(cls) -> "EncodingEvaluation":
        return cls(good=True)

    @classmethod
    def reject(cls, reason: str) -> "EncodingEvaluation":
        return cls(good=False, reason=reason)


class ColumnAnalysisBase(BaseModel):
    """
    Fields shared by every column analysis variant.

    Attributes:
        column_name: Physical column name (joined columns arrive pre-aliased)
        field_id: Optional id of the logical field this column backs
        semantic: Semantic classification
        cardinality: Number of distinct non-null values
        uniqueness: Ratio of distinct values to non-null values
        null_count: Number of null values
        sample_values: Sample of distinct values
    """

    column_name: str = Field(min_length=1)
    field_id: str | None = None
    semantic: ColumnSemantic
    cardinality: int = Field(default=0, ge=0)
    uniqueness: float = Field(default=0.0, ge=0.0, le=1.0)
    null_count: int = Field(default=0, ge=0)
    sample_values: list[Any] = Field(default_factory=list)

    @property
    def is_dimension(self) -> bool:
        """Categorical, text or boolean column."""
        return self.semantic in DIMENSION_SEMANTICS

    def dominant_value_ratio(self) -> float | None:
        """Share of rows holding the most frequent value, when known."""
        return None


class StringAnalysis(ColumnAnalysisBase):
    """Analysis for string columns."""

    data_type: Literal["string"] = "string"
    min_length: int | None = None
    max_length: int | None = None
    avg_length: float | None = None
    pattern: str | None = None
    max_frequency_ratio: float | None = Field(default=None, ge=0.0, le=1.0)

    def dominant_value_ratio(self) -> float | None:
        return self.max_frequency_ratio


class NumberAnalysis(ColumnAnalysisBase):
    """Analysis for numeric columns."""

    data_type: Literal["number"] = "number"
    min: float | None = None
    max: float | None = None
    std_dev: float | None = None
    zero_count: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_range(self) -> "NumberAnalysis":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class DateAnalysis(ColumnAnalysisBase):
    """Analysis for date/time columns. Bounds are milliseconds since epoch."""

    data_type: Literal["date"] = "date"
    semantic: ColumnSemantic = ColumnSemantic.TEMPORAL
    min_date: float | None = None
    max_date: float | None = None


class BooleanAnalysis(ColumnAnalysisBase):
    """Analysis for boolean columns."""

    data_type: Literal["boolean"] = "boolean"
    semantic: ColumnSemantic = ColumnSemantic.BOOLEAN
    true_count: int = Field(default=0, ge=0)
    false_count: int = Field(default=0, ge=0)

    def dominant_value_ratio(self) -> float | None:
        total = self.true_count + self.false_count
        if total == 0:
            return None
        return max(self.true_count, self.false_count) / total


class ArrayAnalysis(ColumnAnalysisBase):
    """Analysis for array columns such as relation lists."""

    data_type: Literal["array"] = "array"
    semantic: ColumnSemantic = ColumnSemantic.REFERENCE
    avg_length: float | None = None


class UnknownAnalysis(ColumnAnalysisBase):
    """Analysis for columns of an unsupported type."""

    data_type: Literal["unknown"] = "unknown"
    semantic: ColumnSemantic = ColumnSemantic.UNKNOWN


ColumnAnalysis = Annotated[
    Union[
        StringAnalysis,
        NumberAnalysis,
        DateAnalysis,
        BooleanAnalysis,
        ArrayAnalysis,
        UnknownAnalysis,
    ],
    Field(discriminator="data_type"),
]


def compute_field_hash(field_ids: Iterable[str]) -> str:
    """Hash of a table's field set, used to invalidate cached analyses."""
    return ",".join(sorted(field_ids))


class DataFrameAnalysis(BaseModel):
    """
    Complete analysis results for one physical table.

    Attributes:
        columns: Analysis for each column
        row_count: Total row count at time of analysis
        analyzed_at: When the analysis was performed
        field_hash: Hash of the field ids the analysis was computed for
    """

    columns: list[ColumnAnalysis] = Field(default_factory=list)
    row_count: int = Field(default=0, ge=0)
    analyzed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    field_hash: str = ""

    def get_column(self, name: str) -> ColumnAnalysis | None:
        """Get column analysis by name."""
        for col in self.columns:
            if col.column_name == name:
                return col
        return None

"""
InsightLens: insight aggregation and chart recommendation

Builds grouped previews of user-defined insights over joined tables and
recommends chart encodings for them from per-column statistics.
"""

__version__ = "0.1.0"
__author__ = "InsightLens Team"

from insightlens.core.aggregation import (
    compute_insight_dataframe,
    compute_insight_preview,
)
from insightlens.core.analysis_merger import AnalysisCache, merge_analyses
from insightlens.core.chart_suggester import ChartSuggester

__all__ = [
    "__version__",
    "AnalysisCache",
    "ChartSuggester",
    "compute_insight_dataframe",
    "compute_insight_preview",
    "merge_analyses",
]

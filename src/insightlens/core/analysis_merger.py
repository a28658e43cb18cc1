"""
Column analysis merging for joined views.

An insight joining several tables has one cached analysis per table. These
helpers stitch them into a single ordered column list and decide whether the
cached analyses are still fresh enough to use.
"""

from collections.abc import Iterable, Mapping, Sequence

from cachetools import Cache, LRUCache, TTLCache
from pydantic import BaseModel

from insightlens.config.logging_config import get_logger
from insightlens.config.settings import get_settings
from insightlens.models.column import ColumnAnalysis, DataFrameAnalysis
from insightlens.utils.exceptions import ConfigurationError

logger = get_logger("analysis_merger")


class AnalysisEntry(BaseModel):
    """A table id paired with its cached analysis, if any."""

    id: str
    analysis: DataFrameAnalysis | None = None


def merge_analyses(analyses: Sequence[DataFrameAnalysis]) -> list[ColumnAnalysis]:
    """
    Merge per-table analyses into one column list.

    Tables are visited in input order and the first occurrence of a column
    name wins. A single analysis is returned as-is without copying.

    Args:
        analyses: Analyses of the participating tables, base table first

    Returns:
        Merged column analyses in first-appearance order
    """
    if not analyses:
        return []
    if len(analyses) == 1:
        return analyses[0].columns

    seen: set[str] = set()
    merged: list[ColumnAnalysis] = []

    for analysis in analyses:
        for col in analysis.columns:
            if col.column_name in seen:
                logger.debug(f"Skipping duplicate column: {col.column_name}")
                continue
            seen.add(col.column_name)
            merged.append(col)

    return merged


def are_analyses_valid(
    entries: Iterable[AnalysisEntry],
    expected_hashes: Mapping[str, str],
) -> bool:
    """
    Check that every entry has a usable, up-to-date analysis.

    Fails on the first entry whose analysis is missing, whose field hash
    differs from the expected one, or which has no columns. Ids absent from
    ``expected_hashes`` carry no freshness requirement.

    Args:
        entries: Table ids with their cached analyses
        expected_hashes: Expected field hash per table id

    Returns:
        True when all analyses can be used
    """
    for entry in entries:
        analysis = entry.analysis
        if analysis is None:
            logger.debug(
                f"Missing analysis for table {entry.id}",
                extra={"table_id": entry.id, "reason": "missing"},
            )
            return False

        expected = expected_hashes.get(entry.id)
        if expected is not None and analysis.field_hash != expected:
            logger.debug(
                f"Field hash mismatch for table {entry.id}: "
                f"expected={expected} actual={analysis.field_hash}",
                extra={"table_id": entry.id, "reason": "hash_mismatch"},
            )
            return False

        if not analysis.columns:
            logger.debug(
                f"Empty analysis for table {entry.id}",
                extra={"table_id": entry.id, "reason": "empty"},
            )
            return False

    return True


class AnalysisCache:
    """
    Caller-owned cache of table analyses keyed by table id.

    The field hash is the only freshness contract: reading with an expected
    hash that differs from the stored one evicts the entry.

    Attributes:
        cache: Underlying cachetools cache
    """

    def __init__(
        self,
        maxsize: int | None = None,
        ttl: int | None = None,
    ) -> None:
        """
        Initialize the cache.

        Args:
            maxsize: Maximum number of analyses (defaults to settings)
            ttl: Optional expiry in seconds (defaults to settings)

        Raises:
            ConfigurationError: If maxsize is below 1 or ttl is negative
        """
        settings = get_settings()
        maxsize = maxsize if maxsize is not None else settings.analysis_cache_size
        ttl = ttl if ttl is not None else settings.analysis_cache_ttl_seconds

        if maxsize < 1:
            raise ConfigurationError(
                f"Analysis cache size must be at least 1, got {maxsize}",
                details={"maxsize": maxsize},
            )
        if ttl is not None and ttl < 0:
            raise ConfigurationError(
                f"Analysis cache TTL must not be negative, got {ttl}",
                details={"ttl": ttl},
            )

        if ttl:
            self.cache: Cache = TTLCache(maxsize=maxsize, ttl=ttl)
        else:
            self.cache = LRUCache(maxsize=maxsize)

    def put(self, table_id: str, analysis: DataFrameAnalysis) -> None:
        self.cache[table_id] = analysis

    def get(
        self,
        table_id: str,
        expected_hash: str | None = None,
    ) -> DataFrameAnalysis | None:
        """Get a cached analysis, evicting it when its field hash is stale."""
        analysis = self.cache.get(table_id)
        if analysis is None:
            return None
        if expected_hash is not None and analysis.field_hash != expected_hash:
            logger.debug(f"Evicting stale analysis for table {table_id}")
            self.cache.pop(table_id, None)
            return None
        return analysis

    def invalidate(self, table_id: str) -> None:
        self.cache.pop(table_id, None)

    def clear(self) -> None:
        self.cache.clear()

    def entries(self, table_ids: Iterable[str]) -> list[AnalysisEntry]:
        """Snapshot of the cached analyses for the given tables, in order."""
        return [
            AnalysisEntry(id=table_id, analysis=self.cache.get(table_id))
            for table_id in table_ids
        ]

    def __contains__(self, table_id: object) -> bool:
        return table_id in self.cache

    def __len__(self) -> int:
        return len(self.cache)


def resolve_merged_columns(
    cache: AnalysisCache,
    table_ids: Sequence[str],
    expected_hashes: Mapping[str, str],
) -> list[ColumnAnalysis] | None:
    """
    Merge cached analyses for a joined view when all of them are valid.

    Returns None when any table needs re-analysis.
    """
    entries = cache.entries(table_ids)
    if not are_analyses_valid(entries, expected_hashes):
        return None
    return merge_analyses([entry.analysis for entry in entries])

"""Best-effort mirror of completed job matches"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from skillmatch.matching.models import JobMatch, SavedAnalysis
from skillmatch.observability import get_logger, counter, AnalysisMetrics
from skillmatch.storage.local_store import LocalStore

logger = get_logger(__name__)

ANALYSES_KEY = "skillmatch_analyses"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class AnalysisHistory:
    """Append-only list of timestamped match results under one store key"""

    def __init__(
        self,
        store: LocalStore,
        key: str = ANALYSES_KEY,
        clock: Optional[Callable[[], str]] = None,
    ):
        self.store = store
        self.key = key
        self.clock = clock or _utc_now_iso

    def save(self, match: JobMatch) -> SavedAnalysis:
        record = SavedAnalysis(**match.model_dump(), timestamp=self.clock())
        records = self._raw_records()
        records.append(record.model_dump(by_alias=True))
        self.store.set(self.key, records)

        counter(AnalysisMetrics.ANALYSES_SAVED)
        logger.debug("Saved analysis", total=len(records), score=match.match_score)
        return record

    def _raw_records(self) -> List[Any]:
        raw = self.store.get(self.key, [])
        if not isinstance(raw, list):
            logger.warning("Ignoring non-list analysis history", key=self.key, type=type(raw).__name__)
            return []
        return list(raw)

    def list(self) -> List[SavedAnalysis]:
        saved: List[SavedAnalysis] = []
        for raw in self._raw_records():
            try:
                saved.append(SavedAnalysis.model_validate(raw))
            except ValidationError as e:
                logger.warning("Skipping malformed saved analysis", error=str(e))
        return saved

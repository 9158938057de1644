"""Metrics and logging infrastructure for SkillMatch.

Counters and histograms for the analysis pipeline are kept in process memory;
logging is a thin structured wrapper over the standard ``logging`` module.
"""
from __future__ import annotations
import json
import logging
import threading
import time
from collections import defaultdict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Any, Iterator, Optional, List


@dataclass
class MetricData:
    """One recorded sample"""
    name: str
    value: float
    tags: Dict[str, str] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)
    type: str = "counter"


class MetricsCollector:
    """Thread-safe in-memory sample store keyed by metric name."""

    def __init__(self):
        self._samples: Dict[str, List[MetricData]] = defaultdict(list)
        self._lock = threading.Lock()

    def counter(self, name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
        self._add(MetricData(name=name, value=value, tags=tags or {}, type="counter"))

    def histogram(self, name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
        self._add(MetricData(name=name, value=value, tags=tags or {}, type="histogram"))

    @contextmanager
    def timer(self, name: str, tags: Optional[Dict[str, str]] = None) -> Iterator[None]:
        """Record the block's wall time as ``{name}.duration_ms``"""
        started = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            self.histogram(f"{name}.duration_ms", elapsed_ms, tags)

    def _add(self, sample: MetricData) -> None:
        with self._lock:
            self._samples[sample.name].append(sample)

    def get_metrics(self, name: Optional[str] = None) -> Dict[str, List[MetricData]]:
        """Recorded samples, optionally only those for ``name``"""
        with self._lock:
            if name:
                return {name: list(self._samples.get(name, []))}
            return {k: list(v) for k, v in self._samples.items()}

    def total(self, name: str, **tags: str) -> float:
        """Sum of the samples for ``name`` whose tags include ``tags``"""
        with self._lock:
            return sum(
                s.value for s in self._samples.get(name, [])
                if all(s.tags.get(k) == v for k, v in tags.items())
            )


_global_metrics = MetricsCollector()


def get_metrics_collector() -> MetricsCollector:
    return _global_metrics


def counter(name: str, value: float = 1.0, tags: Optional[Dict[str, str]] = None) -> None:
    _global_metrics.counter(name, value, tags)


def histogram(name: str, value: float, tags: Optional[Dict[str, str]] = None) -> None:
    _global_metrics.histogram(name, value, tags)


def timer(name: str, tags: Optional[Dict[str, str]] = None):
    return _global_metrics.timer(name, tags)


class AnalysisMetrics:
    """Names of the metrics emitted by the analysis pipeline"""

    RESUME_PARSED = "resume.parsed"
    RESUME_ANALYZED = "resume.analyzed"
    SECTION_FALLBACK = "resume.section_fallback"
    MATCH_SCORED = "matching.scored"
    MATCH_SCORE = "matching.score"
    JOBS_RANKED = "jobs.ranked"
    JOBS_RANK_FALLBACK = "jobs.rank_fallback"
    REMOTE_FALLBACK = "services.fallback"
    ANALYSES_SAVED = "storage.analyses_saved"


class StructuredLogger:
    """Logger that appends keyword context as JSON to the message."""

    def __init__(self, name: str = "skillmatch"):
        self.name = name
        self._logger = logging.getLogger(name)

    def info(self, msg: str, **kwargs) -> None:
        self._log(logging.INFO, msg, kwargs)

    def error(self, msg: str, **kwargs) -> None:
        self._log(logging.ERROR, msg, kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self._log(logging.WARNING, msg, kwargs)

    def debug(self, msg: str, **kwargs) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def _log(self, level: int, msg: str, context: Dict[str, Any]) -> None:
        if not self._logger.isEnabledFor(level):
            return
        if context:
            context_str = json.dumps(context, default=str)
            self._logger.log(level, f"{msg} | {context_str}")
        else:
            self._logger.log(level, msg)


def get_logger(name: str = "skillmatch") -> StructuredLogger:
    """Get a structured logger instance"""
    return StructuredLogger(name)

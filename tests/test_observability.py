"""Tests for metrics collection and structured logging"""
import logging
import pytest
from skillmatch.observability import MetricsCollector, StructuredLogger, get_logger


def test_counter_totals_filter_by_tags():
    collector = MetricsCollector()
    collector.counter("services.fallback", tags={"operation": "parse"})
    collector.counter("services.fallback", value=2, tags={"operation": "analyze"})

    assert collector.total("services.fallback") == 3
    assert collector.total("services.fallback", operation="parse") == 1
    assert collector.total("jobs.ranked") == 0


def test_timer_records_duration():
    collector = MetricsCollector()
    with collector.timer("matching.score", tags={"source": "test"}):
        pass

    recorded = collector.get_metrics("matching.score.duration_ms")["matching.score.duration_ms"]
    assert len(recorded) == 1
    assert recorded[0].type == "histogram"
    assert recorded[0].tags == {"source": "test"}
    assert recorded[0].value >= 0


def test_timer_records_when_block_raises():
    collector = MetricsCollector()
    with pytest.raises(RuntimeError):
        with collector.timer("resume.parse"):
            raise RuntimeError("boom")

    assert len(collector.get_metrics("resume.parse.duration_ms")["resume.parse.duration_ms"]) == 1


def test_structured_logger_appends_json_context(caplog):
    logger = get_logger("skillmatch.test")
    assert isinstance(logger, StructuredLogger)

    with caplog.at_level(logging.INFO, logger="skillmatch.test"):
        logger.info("Scored job match", score=20, missing=["AWS"])
        logger.debug("hidden")

    assert caplog.messages == ['Scored job match | {"score": 20, "missing": ["AWS"]}']

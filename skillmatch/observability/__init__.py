"""Observability module for SkillMatch"""
from .metrics import (
    MetricsCollector,
    get_metrics_collector,
    counter,
    histogram,
    timer,
    AnalysisMetrics,
    StructuredLogger,
    get_logger
)

__all__ = [
    'MetricsCollector',
    'get_metrics_collector',
    'counter',
    'histogram',
    'timer',
    'AnalysisMetrics',
    'StructuredLogger',
    'get_logger'
]

"""Observability package for the discussions service."""

from src.observability.metrics import (
    observe_request_latency,
    increment_comment_created,
    increment_tree_anomaly,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    TreeAnomalyKind,
)

__all__ = [
    "observe_request_latency",
    "increment_comment_created",
    "increment_tree_anomaly",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "TreeAnomalyKind",
]

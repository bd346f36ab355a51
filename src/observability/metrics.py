"""
Prometheus Metrics for the discussions service.

DEPENDENCY:
    pip install prometheus-client

DATA FLOW:
    This file                  presentation/api/metrics.py         Scraper
    ─────────                  ────────────────────────────         ───────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus / Alloy

METRIC TYPES:
    - Counter: Value only goes up (e.g. comments created, tree anomalies)
    - Histogram: Distribution (for percentiles like P95, e.g. latency)
"""

from prometheus_client import (
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)

COMMENTS_CREATED_TOTAL = Counter(
    "discussion_comments_created_total",
    "Total number of comments created by operation",
    ["operation"],
)

TREE_ANOMALIES_TOTAL = Counter(
    "discussion_tree_anomalies_total",
    "Comments that could not be placed normally while building comment trees",
    ["kind"],
)

ERRORS_TOTAL = Counter(
    "discussion_errors_total",
    "Total number of rejected writes by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for discussion_errors_total metric."""

    INVALID_OPERATION = "invalid_operation"
    DIVISION_BY_ZERO = "division_by_zero"
    UNRESOLVED_REFERENCE = "unresolved_reference"


class TreeAnomalyKind:
    """Kind labels for discussion_tree_anomalies_total metric."""

    DANGLING_PARENT = "dangling_parent"
    ORPHANED_COMMENT = "orphaned_comment"
    MALFORMED_RECORD = "malformed_record"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    """Call to record request latency. Integration point: fastapi_app.MetricsMiddleware"""
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def increment_comment_created(operation: str):
    """Integration point: application/commands/comments/add_comment.py"""
    COMMENTS_CREATED_TOTAL.labels(operation=operation).inc()


def increment_tree_anomaly(kind: str, count: int = 1):
    """
    Record comments that were promoted to roots or excluded while building trees.

    Integration points:
        - application/queries/discussions/list_discussions.py
        - application/queries/discussions/get_discussion.py
        - infrastructure/persistence/record_mapping.py
    """
    if count > 0:
        TREE_ANOMALIES_TOTAL.labels(kind=kind).inc(count)


def increment_error(error_type: str):
    """Call to record a rejected write. Integration point: add_comment.py"""
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "observe_request_latency",
    "increment_comment_created",
    "increment_tree_anomaly",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "TreeAnomalyKind",
]

"""Health queries."""

from src.application.queries.health.get_store_stats import (
    GetStoreStatsQuery,
    GetStoreStatsHandler,
    StoreStats,
)

__all__ = [
    "GetStoreStatsQuery",
    "GetStoreStatsHandler",
    "StoreStats",
]

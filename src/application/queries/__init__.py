"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- discussions/ → list_discussions, get_discussion
- health/      → get_store_stats
"""

from src.application.queries.discussions import (
    ListDiscussionsQuery,
    ListDiscussionsHandler,
    GetDiscussionQuery,
    GetDiscussionHandler,
)
from src.application.queries.health import (
    GetStoreStatsQuery,
    GetStoreStatsHandler,
    StoreStats,
)

__all__ = [
    # discussions
    "ListDiscussionsQuery",
    "ListDiscussionsHandler",
    "GetDiscussionQuery",
    "GetDiscussionHandler",
    # health
    "GetStoreStatsQuery",
    "GetStoreStatsHandler",
    "StoreStats",
]

"""Discussion-related queries."""

from src.application.queries.discussions.list_discussions import (
    ListDiscussionsQuery,
    ListDiscussionsHandler,
)
from src.application.queries.discussions.get_discussion import (
    GetDiscussionQuery,
    GetDiscussionHandler,
)

__all__ = [
    "ListDiscussionsQuery",
    "ListDiscussionsHandler",
    "GetDiscussionQuery",
    "GetDiscussionHandler",
]

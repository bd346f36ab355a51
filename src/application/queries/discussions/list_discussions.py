"""
List Discussions Query - every discussion with its comment forest, newest first.

Reads all discussions and all comments, then hands both to the aggregator.
Structural anomalies found while assembling (orphaned comments, dangling
parents) do not fail the read; they are logged and counted.
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.ports.repositories import CommentRepository, DiscussionRepository
from src.domain.services.discussion_aggregator import (
    DiscussionThread,
    aggregate_discussions,
)
from src.observability.metrics import TreeAnomalyKind, increment_tree_anomaly

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListDiscussionsQuery(Query[list[DiscussionThread]]):
    pass


class ListDiscussionsHandler(QueryHandler[list[DiscussionThread]]):
    def __init__(
        self,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
    ):
        self._discussion_repository = discussion_repository
        self._comment_repository = comment_repository

    async def execute(self, query: ListDiscussionsQuery) -> list[DiscussionThread]:
        discussions = await self._discussion_repository.list_newest_first()
        if not discussions:
            return []

        comments = await self._comment_repository.list_all()
        result = aggregate_discussions(discussions, comments)

        increment_tree_anomaly(TreeAnomalyKind.ORPHANED_COMMENT, len(result.orphaned))
        increment_tree_anomaly(TreeAnomalyKind.DANGLING_PARENT, len(result.dangling))

        logger.debug(
            f"Aggregated {len(discussions)} discussion(s) with {len(comments)} comment(s)"
        )
        return result.threads

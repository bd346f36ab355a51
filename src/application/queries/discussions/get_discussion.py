"""Get Discussion Query - one discussion with its comment forest."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.exceptions import UnknownDiscussionError
from src.domain.ports.repositories import CommentRepository, DiscussionRepository
from src.domain.services.discussion_aggregator import (
    DiscussionThread,
    build_discussion_thread,
)
from src.domain.value_objects.discussion_id import DiscussionId
from src.observability.metrics import TreeAnomalyKind, increment_tree_anomaly


@dataclass(frozen=True)
class GetDiscussionQuery(Query[DiscussionThread]):
    discussion_id: DiscussionId


class GetDiscussionHandler(QueryHandler[DiscussionThread]):
    def __init__(
        self,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
    ):
        self._discussion_repository = discussion_repository
        self._comment_repository = comment_repository

    async def execute(self, query: GetDiscussionQuery) -> DiscussionThread:
        """
        Raises:
            UnknownDiscussionError: If the discussion doesn't exist
        """
        discussion = await self._discussion_repository.get_by_id(query.discussion_id)
        if not discussion:
            raise UnknownDiscussionError(query.discussion_id.value)

        comments = await self._comment_repository.list_by_discussion(query.discussion_id)
        thread, dangling = build_discussion_thread(discussion, comments)
        increment_tree_anomaly(TreeAnomalyKind.DANGLING_PARENT, len(dangling))
        return thread

"""GetStoreStats - row counts used by the health endpoint."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.ports.repositories import (
    CommentRepository,
    DiscussionRepository,
    UserRepository,
)


@dataclass
class StoreStats:
    users: int
    discussions: int
    comments: int


@dataclass(frozen=True)
class GetStoreStatsQuery(Query[StoreStats]):
    pass


class GetStoreStatsHandler(QueryHandler[StoreStats]):
    def __init__(
        self,
        user_repository: UserRepository,
        discussion_repository: DiscussionRepository,
        comment_repository: CommentRepository,
    ):
        self._user_repository = user_repository
        self._discussion_repository = discussion_repository
        self._comment_repository = comment_repository

    async def execute(self, query: GetStoreStatsQuery) -> StoreStats:
        return StoreStats(
            users=await self._user_repository.count(),
            discussions=await self._discussion_repository.count(),
            comments=await self._comment_repository.count(),
        )

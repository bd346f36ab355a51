"""
Prisma storage provider.

- Prisma client is APP-scoped: connected once on first use, disconnected when
  the container closes
- Repositories are REQUEST-scoped and share the client
"""

from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from src.domain.ports.repositories import (
    CommentRepository,
    DiscussionRepository,
    UserRepository,
)
from src.infrastructure.persistence.prisma_comment_repository import (
    PrismaCommentRepository,
)
from src.infrastructure.persistence.prisma_discussion_repository import (
    PrismaDiscussionRepository,
)
from src.infrastructure.persistence.prisma_user_repository import PrismaUserRepository


class PrismaStorageProvider(Provider):
    def __init__(self, database_url: str):
        super().__init__()
        self._database_url = database_url

    # ==================== DATABASE ====================
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        prisma = Prisma(datasource={"url": self._database_url})
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================
    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, prisma: Prisma) -> UserRepository:
        return PrismaUserRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_discussion_repository(self, prisma: Prisma) -> DiscussionRepository:
        return PrismaDiscussionRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, prisma: Prisma) -> CommentRepository:
        return PrismaCommentRepository(prisma)

"""
Prisma Discussion Repository Implementation.

- Implements DiscussionRepository port from domain layer
- Joins the owning user so the entity carries the username
- Storage assigns id and created_at

Prisma Discussion Model (from schema.prisma):
    model Discussion {
        id           Int      @id @default(autoincrement())
        user_id      Int
        start_number Float
        created_at   DateTime @default(now())
        user         User     @relation(...)
        comments     Comment[]
    }
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Discussion as PrismaDiscussion
from src.domain.entities.discussion import Discussion
from src.domain.ports.repositories import DiscussionRepository
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.user_id import UserId
from src.infrastructure.persistence.record_mapping import map_records

_INCLUDE_USER = {"user": True}


class PrismaDiscussionRepository(DiscussionRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaDiscussion) -> Discussion:
        """Map Prisma record (with user included) to domain entity."""
        return Discussion(
            id=DiscussionId(record.id),
            user_id=UserId(record.user_id),
            username=record.user.username if record.user else "",
            start_number=record.start_number,
            created_at=record.created_at,
        )

    async def get_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        record = await self._prisma.discussion.find_unique(
            where={"id": discussion_id.value}, include=_INCLUDE_USER
        )
        return self._to_entity(record) if record else None

    async def list_newest_first(self) -> list[Discussion]:
        records = await self._prisma.discussion.find_many(
            order=[{"created_at": "desc"}, {"id": "desc"}],
            include=_INCLUDE_USER,
        )
        return map_records(records, self._to_entity, "discussion")

    async def add(self, user_id: UserId, start_number: float) -> Discussion:
        record = await self._prisma.discussion.create(
            data={"user_id": user_id.value, "start_number": start_number},
            include=_INCLUDE_USER,
        )
        return self._to_entity(record)

    async def count(self) -> int:
        return await self._prisma.discussion.count()

"""
Prisma Comment Repository Implementation.

- Implements CommentRepository port from domain layer
- Lists are ordered by created_at asc, then id asc (creation order)
- The computed result is written in the same create() as the comment itself
- List reads skip rows that no longer validate (see record_mapping.py)

Prisma Comment Model (from schema.prisma):
    model Comment {
        id            Int      @id @default(autoincrement())
        discussion_id Int
        parent_id     Int?
        user_id       Int
        operation     String
        operand       Float
        result        Float
        created_at    DateTime @default(now())
    }
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Comment as PrismaComment
from src.domain.entities.comment import Comment, CommentDraft
from src.domain.ports.repositories import CommentRepository
from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.operation import Operation
from src.domain.value_objects.user_id import UserId
from src.infrastructure.persistence.record_mapping import map_records

_INCLUDE_USER = {"user": True}
_CREATION_ORDER = [{"created_at": "asc"}, {"id": "asc"}]


class PrismaCommentRepository(CommentRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaComment) -> Comment:
        """Map Prisma record (with user included) to domain entity."""
        return Comment(
            id=CommentId(record.id),
            discussion_id=DiscussionId(record.discussion_id),
            parent_id=CommentId(record.parent_id) if record.parent_id else None,
            user_id=UserId(record.user_id),
            username=record.user.username if record.user else "",
            operation=Operation.parse(record.operation),
            operand=record.operand,
            result=record.result,
            created_at=record.created_at,
        )

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        record = await self._prisma.comment.find_unique(
            where={"id": comment_id.value}, include=_INCLUDE_USER
        )
        return self._to_entity(record) if record else None

    async def list_all(self) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            order=_CREATION_ORDER, include=_INCLUDE_USER
        )
        return map_records(records, self._to_entity, "comment")

    async def list_by_discussion(self, discussion_id: DiscussionId) -> list[Comment]:
        records = await self._prisma.comment.find_many(
            where={"discussion_id": discussion_id.value},
            order=_CREATION_ORDER,
            include=_INCLUDE_USER,
        )
        return map_records(records, self._to_entity, "comment")

    async def add(self, draft: CommentDraft, result: float) -> Comment:
        record = await self._prisma.comment.create(
            data={
                "discussion_id": draft.discussion_id.value,
                "parent_id": draft.parent_id.value if draft.parent_id else None,
                "user_id": draft.user_id.value,
                "operation": draft.operation.value,
                "operand": draft.operand,
                "result": result,
            },
            include=_INCLUDE_USER,
        )
        return self._to_entity(record)

    async def count(self) -> int:
        return await self._prisma.comment.count()

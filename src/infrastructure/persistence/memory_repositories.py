"""
In-memory repository implementations.

Used when STORAGE_BACKEND=memory (local runs without a database) and by the
test-suite. All three repositories share one InMemoryStore, which the DI
container keeps for the lifetime of the app.

Ids are assigned under a lock, so comments created concurrently under the
same parent still get distinct ids and a total creation order.
"""

import asyncio
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Callable, Optional

from src.domain.entities.comment import Comment, CommentDraft
from src.domain.entities.discussion import Discussion
from src.domain.entities.user import User
from src.domain.exceptions import UsernameTakenError
from src.domain.ports.repositories import (
    CommentRepository,
    DiscussionRepository,
    UserRepository,
)
from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.operation import Operation
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.username import Username
from src.infrastructure.persistence.record_mapping import map_records


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class InMemoryStore:
    users: dict[int, User] = field(default_factory=dict)
    discussions: dict[int, Discussion] = field(default_factory=dict)
    comments: dict[int, Comment] = field(default_factory=dict)
    clock: Callable[[], datetime] = _utc_now
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def next_id(self, table: dict) -> int:
        return max(table, default=0) + 1

    def username_of(self, user_id: UserId) -> str:
        user = self.users.get(user_id.value)
        return user.username.value if user else ""


class InMemoryUserRepository(UserRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        return self._store.users.get(user_id.value)

    async def get_by_username(self, username: Username) -> Optional[User]:
        for user in self._store.users.values():
            if user.username == username:
                return user
        return None

    async def add(self, username: Username, password_hash: str) -> User:
        async with self._store.lock:
            if await self.get_by_username(username):
                raise UsernameTakenError(username.value)
            user = User(
                id=UserId(self._store.next_id(self._store.users)),
                username=username,
                password_hash=password_hash,
                created_at=self._store.clock(),
            )
            self._store.users[user.id.value] = user
        return user

    async def count(self) -> int:
        return len(self._store.users)


class InMemoryDiscussionRepository(DiscussionRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _with_username(self, discussion: Discussion) -> Discussion:
        return replace(discussion, username=self._store.username_of(discussion.user_id))

    async def get_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]:
        discussion = self._store.discussions.get(discussion_id.value)
        return self._with_username(discussion) if discussion else None

    async def list_newest_first(self) -> list[Discussion]:
        discussions = sorted(
            self._store.discussions.values(),
            key=lambda d: (d.created_at, d.id.value),
            reverse=True,
        )
        return [self._with_username(d) for d in discussions]

    async def add(self, user_id: UserId, start_number: float) -> Discussion:
        async with self._store.lock:
            discussion = Discussion(
                id=DiscussionId(self._store.next_id(self._store.discussions)),
                user_id=user_id,
                username=self._store.username_of(user_id),
                start_number=start_number,
                created_at=self._store.clock(),
            )
            self._store.discussions[discussion.id.value] = discussion
        return discussion

    async def count(self) -> int:
        return len(self._store.discussions)


class InMemoryCommentRepository(CommentRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _to_entity(self, comment: Comment) -> Comment:
        return replace(
            comment,
            operation=Operation.parse(comment.operation),
            username=self._store.username_of(comment.user_id),
        )

    def _in_creation_order(self, comments) -> list[Comment]:
        ordered = sorted(comments, key=lambda c: c.sort_key)
        return map_records(ordered, self._to_entity, "comment")

    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return self._store.comments.get(comment_id.value)

    async def list_all(self) -> list[Comment]:
        return self._in_creation_order(self._store.comments.values())

    async def list_by_discussion(self, discussion_id: DiscussionId) -> list[Comment]:
        return self._in_creation_order(
            c for c in self._store.comments.values() if c.discussion_id == discussion_id
        )

    async def add(self, draft: CommentDraft, result: float) -> Comment:
        async with self._store.lock:
            comment = Comment(
                id=CommentId(self._store.next_id(self._store.comments)),
                discussion_id=draft.discussion_id,
                parent_id=draft.parent_id,
                user_id=draft.user_id,
                username=self._store.username_of(draft.user_id),
                operation=draft.operation,
                operand=draft.operand,
                result=result,
                created_at=self._store.clock(),
            )
            self._store.comments[comment.id.value] = comment
        return comment

    async def count(self) -> int:
        return len(self._store.comments)

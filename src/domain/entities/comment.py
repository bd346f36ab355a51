"""
Comment Entity - One arithmetic step replying to a discussion or another comment.

A comment's ``result`` is computed once, when the comment is created, from the
previous number (parent result or discussion seed). It is stored and never
recomputed.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.operation import Operation
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class CommentDraft:
    """A comment that has been validated but not yet persisted (no id, no result)."""

    discussion_id: DiscussionId
    parent_id: Optional[CommentId]
    user_id: UserId
    operation: Operation
    operand: float


@dataclass(frozen=True)
class Comment:
    id: CommentId
    discussion_id: DiscussionId
    parent_id: Optional[CommentId]
    user_id: UserId
    username: str
    operation: Operation
    operand: float
    result: float
    created_at: datetime

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    @property
    def sort_key(self) -> tuple[datetime, int]:
        """Creation order: timestamp first, id breaks ties."""
        return (self.created_at, self.id.value)

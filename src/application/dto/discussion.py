"""Discussion DTOs for API responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.domain.entities.comment import Comment
from src.domain.services.comment_tree import CommentNode
from src.domain.services.discussion_aggregator import DiscussionThread


class CamelModel(BaseModel):
    """Base model that reads snake_case and writes camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommentDTO(CamelModel):
    """A single comment, as returned after it is created."""

    id: int
    discussion_id: int
    parent_id: Optional[int] = None
    user_id: int
    username: str
    operation: str
    operand: float
    result: float
    created_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> CommentDTO:
        return cls(
            id=comment.id.value,
            discussion_id=comment.discussion_id.value,
            parent_id=comment.parent_id.value if comment.parent_id else None,
            user_id=comment.user_id.value,
            username=comment.username,
            operation=comment.operation.value,
            operand=comment.operand,
            result=comment.result,
            created_at=comment.created_at,
        )


class CommentNodeDTO(CommentDTO):
    """A comment with its replies, nested recursively."""

    children: list[CommentNodeDTO] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode) -> CommentNodeDTO:
        # Iterative so deep reply chains cannot hit the recursion limit
        root = cls(**CommentDTO.from_entity(node.comment).model_dump())
        stack = [(node, root)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                child_dto = cls(**CommentDTO.from_entity(child.comment).model_dump())
                target.children.append(child_dto)
                stack.append((child, child_dto))
        return root


class DiscussionDTO(CamelModel):
    """
    A discussion with its comment forest.

    Wire format:
    {
        "id": 1,
        "userId": 1,
        "username": "alice",
        "startNumber": 10.0,
        "createdAt": "2026-01-27T12:00:00Z",
        "comments": [{"id": 1, ..., "result": 15.0, "children": [...]}]
    }
    """

    id: int
    user_id: int
    username: str
    start_number: float
    created_at: datetime
    comments: list[CommentNodeDTO] = Field(default_factory=list)

    @classmethod
    def from_thread(cls, thread: DiscussionThread) -> DiscussionDTO:
        discussion = thread.discussion
        return cls(
            id=discussion.id.value,
            user_id=discussion.user_id.value,
            username=discussion.username,
            start_number=discussion.start_number,
            created_at=discussion.created_at,
            comments=[CommentNodeDTO.from_node(node) for node in thread.comments],
        )

"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Is created once and never mutated afterwards
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from src.domain.entities.user import User
from src.domain.entities.discussion import Discussion
from src.domain.entities.comment import Comment, CommentDraft

__all__ = [
    "User",
    "Discussion",
    "Comment",
    "CommentDraft",
]

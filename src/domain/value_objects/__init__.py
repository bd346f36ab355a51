"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.username import Username
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.operation import Operation

__all__ = [
    "UserId",
    "Username",
    "DiscussionId",
    "CommentId",
    "Operation",
]

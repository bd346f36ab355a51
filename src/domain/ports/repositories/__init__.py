"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.discussion_repository import DiscussionRepository
from src.domain.ports.repositories.comment_repository import CommentRepository
from src.domain.ports.repositories.user_repository import UserRepository

__all__ = [
    "DiscussionRepository",
    "CommentRepository",
    "UserRepository",
]

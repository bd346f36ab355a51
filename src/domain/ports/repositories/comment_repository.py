"""
Comment Repository Port - Interface for comment persistence.
Implementations: src/infrastructure/persistence/prisma_comment_repository.py,
                 src/infrastructure/persistence/memory_repositories.py

Every list method returns comments in creation order: created_at ascending,
ties broken by id ascending. The tree builder relies on this order.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.comment import Comment, CommentDraft
from src.domain.value_objects.comment_id import CommentId
from src.domain.value_objects.discussion_id import DiscussionId


class CommentRepository(ABC):
    @abstractmethod
    async def get_by_id(self, comment_id: CommentId) -> Optional[Comment]: ...

    @abstractmethod
    async def list_all(self) -> list[Comment]: ...

    @abstractmethod
    async def list_by_discussion(self, discussion_id: DiscussionId) -> list[Comment]: ...

    @abstractmethod
    async def add(self, draft: CommentDraft, result: float) -> Comment:
        """Persist a draft together with its computed result in one write."""
        ...

    @abstractmethod
    async def count(self) -> int: ...

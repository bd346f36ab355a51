"""
Discussion Repository Port - Interface for discussion persistence.
Implementations: src/infrastructure/persistence/prisma_discussion_repository.py,
                 src/infrastructure/persistence/memory_repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.discussion import Discussion
from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.user_id import UserId


class DiscussionRepository(ABC):
    @abstractmethod
    async def get_by_id(self, discussion_id: DiscussionId) -> Optional[Discussion]: ...

    @abstractmethod
    async def list_newest_first(self) -> list[Discussion]:
        """All discussions, newest created first (ties: higher id first)."""
        ...

    @abstractmethod
    async def add(self, user_id: UserId, start_number: float) -> Discussion:
        """Persist a new discussion. Storage assigns the id and timestamp."""
        ...

    @abstractmethod
    async def count(self) -> int: ...

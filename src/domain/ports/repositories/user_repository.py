"""
User Repository Port - Interface for user persistence.
Implementations: src/infrastructure/persistence/prisma_user_repository.py,
                 src/infrastructure/persistence/memory_repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.user import User
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.username import Username


class UserRepository(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_by_username(self, username: Username) -> Optional[User]: ...

    @abstractmethod
    async def add(self, username: Username, password_hash: str) -> User:
        """Persist a new user. Raises UsernameTakenError if the name exists."""
        ...

    @abstractmethod
    async def count(self) -> int: ...

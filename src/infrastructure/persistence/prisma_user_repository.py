"""
Prisma User Repository Implementation.

Prisma User Model (from schema.prisma):
    model User {
        id            Int      @id @default(autoincrement())
        username      String   @unique
        password_hash String
        created_at    DateTime @default(now())
    }
"""

from typing import Optional
from prisma import Prisma
from prisma.errors import UniqueViolationError
from prisma.models import User as PrismaUser
from src.domain.entities.user import User
from src.domain.exceptions import UsernameTakenError
from src.domain.ports.repositories import UserRepository
from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.username import Username


class PrismaUserRepository(UserRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> User:
        """Map Prisma record to domain entity."""
        return User(
            id=UserId(record.id),
            username=Username(record.username),
            password_hash=record.password_hash,
            created_at=record.created_at,
        )

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_by_username(self, username: Username) -> Optional[User]:
        record = await self._prisma.user.find_unique(
            where={"username": username.value}
        )
        return self._to_entity(record) if record else None

    async def add(self, username: Username, password_hash: str) -> User:
        try:
            record = await self._prisma.user.create(
                data={"username": username.value, "password_hash": password_hash}
            )
        except UniqueViolationError as e:
            # Lost a race with a concurrent registration of the same name
            raise UsernameTakenError(username.value) from e
        return self._to_entity(record)

    async def count(self) -> int:
        return await self._prisma.user.count()

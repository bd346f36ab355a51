"""Auth DTOs for API responses."""

from src.application.dto.discussion import CamelModel
from src.domain.entities.user import User


class UserDTO(CamelModel):
    id: int
    username: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(id=user.id.value, username=user.username.value)

"""
User Entity - A registered participant.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.username import Username


@dataclass
class User:
    id: UserId
    username: Username
    password_hash: str
    created_at: datetime

    def __post_init__(self):
        if not self.password_hash:
            raise ValueError("User must have a password hash.")

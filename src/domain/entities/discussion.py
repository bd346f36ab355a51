"""
Discussion Entity - A numeric thread seeded with a starting number.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from src.domain.value_objects.discussion_id import DiscussionId
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Discussion:
    id: DiscussionId
    user_id: UserId
    username: str
    start_number: float
    created_at: datetime

    def __post_init__(self):
        if not math.isfinite(self.start_number):
            raise ValueError(f"Start number must be finite: {self.start_number}")

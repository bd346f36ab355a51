"""
DiscussionId Value Object - integer wrapper for discussion identity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiscussionId:
    value: int  # discussions.id, assigned by storage

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid discussion ID: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"Discussion ID must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

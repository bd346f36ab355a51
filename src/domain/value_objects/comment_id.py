"""
CommentId Value Object - integer wrapper for comment identity.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CommentId:
    value: int  # comments.id, assigned by storage

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid comment ID: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"Comment ID must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

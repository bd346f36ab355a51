"""
Operation Value Object - the closed set of arithmetic steps a comment can apply.
"""

from enum import Enum

from src.domain.exceptions.invalid_operation import InvalidOperationError


class Operation(str, Enum):
    ADD = "ADD"
    SUBTRACT = "SUBTRACT"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    @classmethod
    def parse(cls, token: "Operation | str") -> "Operation":
        """Convert a wire token into an Operation, rejecting anything unknown."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            raise InvalidOperationError(token)
        try:
            return cls(token)
        except ValueError:
            raise InvalidOperationError(token) from None

    def __str__(self) -> str:
        return self.value

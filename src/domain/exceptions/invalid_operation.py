"""
Arithmetic errors raised while computing a comment's result.
Maps to: HTTP 400 Bad Request
"""

from src.domain.exceptions.validation_error import DomainValidationError


class InvalidOperationError(DomainValidationError):
    """The operation token is not one of ADD, SUBTRACT, MULTIPLY, DIVIDE."""

    def __init__(self, operation):
        super().__init__(f"Invalid operation: {operation!r}")
        self.operation = operation


class DivisionByZeroError(DomainValidationError):
    """DIVIDE was requested with a zero operand."""

    def __init__(self):
        super().__init__("Division by zero")

"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from src.domain.exceptions.entity_not_found import (
    EntityNotFoundError,
    UnknownDiscussionError,
    UnresolvedParentError,
)
from src.domain.exceptions.authentication import AuthenticationError
from src.domain.exceptions.validation_error import (
    DomainValidationError,
    UsernameTakenError,
)
from src.domain.exceptions.invalid_operation import (
    InvalidOperationError,
    DivisionByZeroError,
)

__all__ = [
    "EntityNotFoundError",
    "UnknownDiscussionError",
    "UnresolvedParentError",
    "AuthenticationError",
    "DomainValidationError",
    "UsernameTakenError",
    "InvalidOperationError",
    "DivisionByZeroError",
]

"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- discussion.py → DiscussionDTO, CommentDTO, CommentNodeDTO
- auth.py       → UserDTO

Note: These are different from domain entities.
DTOs are for API input/output (camelCase on the wire), entities are for business logic.
"""

from src.application.dto.discussion import (
    CamelModel,
    CommentDTO,
    CommentNodeDTO,
    DiscussionDTO,
)
from src.application.dto.auth import UserDTO

__all__ = [
    "CamelModel",
    "CommentDTO",
    "CommentNodeDTO",
    "DiscussionDTO",
    "UserDTO",
]

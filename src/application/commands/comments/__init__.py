"""Comment commands."""

from .add_comment import AddCommentCommand, AddCommentHandler

__all__ = [
    "AddCommentCommand",
    "AddCommentHandler",
]

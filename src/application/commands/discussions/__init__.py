"""Discussion commands."""

from .create_discussion import CreateDiscussionCommand, CreateDiscussionHandler

__all__ = [
    "CreateDiscussionCommand",
    "CreateDiscussionHandler",
]

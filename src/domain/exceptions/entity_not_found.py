"""
EntityNotFoundError - Raised when a requested entity does not exist.
Maps to: HTTP 404 Not Found
"""


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(self, message: str = "The requested entity was not found."):
        super().__init__(message)


class UnknownDiscussionError(EntityNotFoundError):
    """A comment or lookup referenced a discussion that does not exist."""

    def __init__(self, discussion_id):
        super().__init__(f"Discussion {discussion_id} not found")
        self.discussion_id = discussion_id


class UnresolvedParentError(EntityNotFoundError):
    """The parent comment does not exist or belongs to another discussion."""

    def __init__(self, parent_id, discussion_id):
        super().__init__(
            f"Parent comment {parent_id} not found in discussion {discussion_id}"
        )
        self.parent_id = parent_id
        self.discussion_id = discussion_id

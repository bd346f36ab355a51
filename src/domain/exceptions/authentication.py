"""
AuthenticationError - Raised when credentials or the acting user cannot be verified.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    """Raised when a user cannot be authenticated"""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)

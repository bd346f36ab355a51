"""
Username Value Object - Wraps a login name with validation.
"""

import re
from dataclasses import dataclass

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.\-]{3,32}$")


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not self.value or not _USERNAME_PATTERN.match(self.value):
            raise ValueError(
                f"Invalid username: {self.value!r}. Use 3-32 letters, digits, '_', '-' or '.'"
            )

    def __str__(self) -> str:
        return self.value

"""
Password Hasher Port - Interface for one-way credential hashing.
Implementation: src/infrastructure/security/werkzeug_password_hasher.py
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    def hash(self, password: str) -> str: ...

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool: ...

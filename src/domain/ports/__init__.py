"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/       → Data persistence interfaces
- password_hasher.py  → Credential hashing interface
"""

from src.domain.ports.password_hasher import PasswordHasher

__all__ = ["PasswordHasher"]

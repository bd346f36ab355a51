"""
Persistence Layer - Database implementations.

- prisma_*_repository.py  → Prisma (SQLite) implementations of the domain ports
- memory_repositories.py  → Process-local implementations (STORAGE_BACKEND=memory)

The Prisma modules need a generated client (`prisma generate`), so they are
imported from their own modules rather than re-exported here.
"""

from src.infrastructure.persistence.memory_repositories import (
    InMemoryStore,
    InMemoryUserRepository,
    InMemoryDiscussionRepository,
    InMemoryCommentRepository,
)

__all__ = [
    "InMemoryStore",
    "InMemoryUserRepository",
    "InMemoryDiscussionRepository",
    "InMemoryCommentRepository",
]

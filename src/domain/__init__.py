"""
DOMAIN LAYER - Discussions, comments and the arithmetic that links them

This layer contains:
- Entities: Business objects with identity (User, Discussion, Comment)
- Value Objects: Immutable types (UserId, DiscussionId, CommentId, Operation)
- Ports: Interfaces that infrastructure implements
- Services: Pure domain logic (evaluator, comment tree builder, aggregator)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, Prisma, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""

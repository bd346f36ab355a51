"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Repository implementations (Prisma, in-memory)
- security/: Password hashing (werkzeug)
"""

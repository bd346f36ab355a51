"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: JWT auth dependency
- rate_limit.py: slowapi limiter shared by routers
"""

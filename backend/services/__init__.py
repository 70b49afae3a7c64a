"""
Service layer package.

Each module encapsulates domain logic independent of Flask or HTTP concerns.
"""

__all__ = [
    "exercises_service",
    "log_query",
    "users_service",
]

"""Repository package exposing all repository modules."""

from . import exercises_repo, users_repo

__all__ = [
    "users_repo",
    "exercises_repo",
]

"""Repository implementations for infrastructure layer."""

from .user_repository import InMemoryUserRepository

__all__ = [
    "InMemoryUserRepository",
]

"""Use cases for managing users."""

from .get_user_name import get_user_name

__all__ = [
    "get_user_name",
]

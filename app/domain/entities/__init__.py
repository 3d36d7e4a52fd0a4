"""Domain entities exposed by the application."""

from .greeting import Greeting
from .user import User

__all__ = [
    "Greeting",
    "User",
]

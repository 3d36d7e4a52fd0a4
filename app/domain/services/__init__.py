"""Domain services holding the library business rules."""

from .library_manager import LibraryManager
from .user_service import UserService

__all__ = ["LibraryManager", "UserService"]

"""FastAPI dependency utilities."""

from functools import lru_cache

from app.config import get_settings
from app.domain.repositories import UserRepository
from app.domain.services import LibraryManager
from app.infrastructure.repositories import InMemoryUserRepository


@lru_cache
def get_library_manager() -> LibraryManager:
    """Return the process-wide library, seeded from the configured titles."""

    settings = get_settings()
    return LibraryManager(settings.initial_books)


@lru_cache
def get_user_repository() -> UserRepository:
    """Return the process-wide user repository."""

    settings = get_settings()
    return InMemoryUserRepository.from_mapping(settings.initial_users)


def reset_dependency_cache() -> None:
    """Drop the shared library and repository so they are rebuilt on next use."""

    get_library_manager.cache_clear()
    get_user_repository.cache_clear()

"""Use cases for registering and querying book titles."""

import logging

from app.domain.exceptions import InvalidArgumentError
from app.domain.services import LibraryManager

from .validators import normalize_title

logger = logging.getLogger(__name__)


def add_book(manager: LibraryManager, title: str) -> bool:
    """Register ``title`` returning ``False`` when it is a duplicate."""

    normalized = normalize_title(title)
    if not normalized:
        raise InvalidArgumentError("El título del libro es obligatorio")

    added = manager.add_book(normalized)
    if added:
        logger.info("Libro registrado: %s", normalized)
    else:
        logger.warning("El libro %s ya estaba registrado", normalized)
    return added


def is_available(manager: LibraryManager, title: str) -> bool:
    return manager.is_available(normalize_title(title))


def list_available_books(manager: LibraryManager) -> list[str]:
    return manager.get_available_books()

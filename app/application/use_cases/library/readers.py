"""Use case for classifying readers."""

from app.domain.services import LibraryManager


def get_reader_category(books_read: int) -> str:
    """Return the category label for a reader with ``books_read`` books."""

    return LibraryManager.get_reader_category(books_read)

"""Use cases for managing the library catalogue."""

from .books import add_book, is_available, list_available_books
from .pricing import calculate_discounted_price
from .readers import get_reader_category
from .validators import normalize_title

__all__ = [
    "add_book",
    "calculate_discounted_price",
    "get_reader_category",
    "is_available",
    "list_available_books",
    "normalize_title",
]

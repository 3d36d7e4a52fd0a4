"""Aggregate application use cases."""

from .create_greeting import create_greeting
from .library import (
    add_book,
    calculate_discounted_price,
    get_reader_category,
    is_available,
    list_available_books,
)
from .users import get_user_name

__all__ = [
    "add_book",
    "calculate_discounted_price",
    "create_greeting",
    "get_reader_category",
    "get_user_name",
    "is_available",
    "list_available_books",
]

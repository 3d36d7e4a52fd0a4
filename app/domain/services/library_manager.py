"""In-memory catalogue of book titles plus pricing and reader helpers."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.exceptions import InvalidArgumentError

CATEGORY_BEGINNER = "Beginner"
CATEGORY_INTERMEDIATE = "Intermediate"
CATEGORY_ADVANCED = "Advanced"

INTERMEDIATE_MAX_BOOKS = 10


class LibraryManager:
    """Keep track of the titles available in the library."""

    def __init__(self, initial_titles: Iterable[str] = ()) -> None:
        self.available_titles: set[str] = set(initial_titles)

    @staticmethod
    def calculate_price_with_discount(
        base_price: float, discount_percent: float
    ) -> float:
        """Return ``base_price`` reduced by ``discount_percent`` percent.

        The discount is applied as given; only negative base prices are
        rejected with ``InvalidArgumentError``.
        """

        if base_price < 0:
            raise InvalidArgumentError("El precio base no puede ser negativo")
        return base_price * (1 - discount_percent / 100)

    def is_available(self, title: str) -> bool:
        return title in self.available_titles

    def add_book(self, title: str) -> bool:
        """Register ``title`` and return ``False`` when it was already present."""

        if title in self.available_titles:
            return False
        self.available_titles.add(title)
        return True

    @staticmethod
    def get_reader_category(books_read: int) -> str:
        """Classify a reader by the number of books they have read.

        ``0`` is ``Beginner``, ``1`` to ``10`` is ``Intermediate`` and anything
        above is ``Advanced``. Negative counts raise ``InvalidArgumentError``.
        """

        if books_read < 0:
            raise InvalidArgumentError("La cantidad de libros leídos no puede ser negativa")
        if books_read == 0:
            return CATEGORY_BEGINNER
        if books_read <= INTERMEDIATE_MAX_BOOKS:
            return CATEGORY_INTERMEDIATE
        return CATEGORY_ADVANCED

    def get_available_books(self) -> list[str]:
        """Return a sorted copy of the registered titles."""

        return sorted(self.available_titles)


__all__ = [
    "CATEGORY_ADVANCED",
    "CATEGORY_BEGINNER",
    "CATEGORY_INTERMEDIATE",
    "LibraryManager",
]

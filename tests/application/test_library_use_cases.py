"""Tests for the application use cases wrapping the domain services."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.application.use_cases import (  # noqa: E402
    add_book,
    calculate_discounted_price,
    create_greeting,
    get_reader_category,
    get_user_name,
    is_available,
    list_available_books,
)
from app.domain.exceptions import InvalidArgumentError, UserNotFoundError  # noqa: E402
from app.domain.services import LibraryManager  # noqa: E402
from app.infrastructure.repositories import InMemoryUserRepository  # noqa: E402


def test_add_book_strips_whitespace_and_logs(caplog) -> None:
    manager = LibraryManager()

    with caplog.at_level("INFO"):
        assert add_book(manager, "  1984 ") is True

    assert is_available(manager, "1984") is True
    assert "Libro registrado: 1984" in caplog.text


def test_add_book_duplicate_logs_warning(caplog) -> None:
    manager = LibraryManager(["Don Quixote"])

    with caplog.at_level("WARNING"):
        assert add_book(manager, "Don Quixote") is False

    assert "ya estaba registrado" in caplog.text
    assert list_available_books(manager) == ["Don Quixote"]


def test_add_book_rejects_blank_title() -> None:
    manager = LibraryManager()

    with pytest.raises(InvalidArgumentError):
        add_book(manager, "   ")

    assert list_available_books(manager) == []


def test_calculate_discounted_price_logs_invalid_price(caplog) -> None:
    assert calculate_discounted_price(80.0, 25.0) == pytest.approx(60.0)

    with caplog.at_level("WARNING"), pytest.raises(InvalidArgumentError):
        calculate_discounted_price(-10.0, 20.0)

    assert "Precio base inválido" in caplog.text


def test_get_reader_category_delegates_to_manager() -> None:
    assert get_reader_category(0) == "Beginner"
    assert get_reader_category(5) == "Intermediate"
    assert get_reader_category(25) == "Advanced"


def test_get_user_name_use_case() -> None:
    repository = InMemoryUserRepository.from_mapping({"123": "Juan"})

    assert get_user_name(repository, "123") == "Juan"
    with pytest.raises(UserNotFoundError, match="User not found"):
        get_user_name(repository, "999")


def test_create_greeting_uses_app_name() -> None:
    assert create_greeting("Library API").message == "Welcome to Library API"
    assert create_greeting().message == "Welcome to the library"


def test_is_available_ignores_surrounding_whitespace() -> None:
    manager = LibraryManager()
    add_book(manager, " Dune ")

    assert is_available(manager, " Dune ") is True
    assert is_available(manager, "Dune") is True
    assert is_available(manager, "   ") is False


def test_calculate_discounted_price_rejects_non_finite_result() -> None:
    with pytest.raises(InvalidArgumentError):
        calculate_discounted_price(1e308, -1e10)

    with pytest.raises(InvalidArgumentError):
        calculate_discounted_price(float("inf"), 10.0)

"""Rutas para registrar y consultar libros."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.use_cases.library import (
    add_book as add_book_uc,
    is_available as is_available_uc,
    list_available_books as list_available_books_uc,
    normalize_title,
)
from app.domain.exceptions import InvalidArgumentError
from app.domain.services import LibraryManager
from app.interfaces.api.dependencies import get_library_manager
from app.interfaces.api.schemas import BookAdded, BookAvailability, BookCreate, BookList

router = APIRouter(prefix="/books", tags=["books"])


@router.get("/", response_model=BookList)
def list_books(manager: LibraryManager = Depends(get_library_manager)):
    """Devuelve los títulos disponibles en la biblioteca."""

    return BookList(titles=list_available_books_uc(manager))


@router.get("/availability", response_model=BookAvailability)
def check_availability(
    title: str = Query(..., min_length=1),
    manager: LibraryManager = Depends(get_library_manager),
):
    """Indica si ``title`` está registrado."""

    return BookAvailability(title=title, available=is_available_uc(manager, title))


@router.post("/", response_model=BookAdded, status_code=status.HTTP_201_CREATED)
def register_book(
    book_in: BookCreate,
    manager: LibraryManager = Depends(get_library_manager),
):
    """Registra un nuevo libro rechazando duplicados."""

    try:
        added = add_book_uc(manager, book_in.title)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    if not added:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="El libro ya está registrado",
        )
    return BookAdded(title=normalize_title(book_in.title), added=True)

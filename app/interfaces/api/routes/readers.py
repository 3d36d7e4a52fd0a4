from fastapi import APIRouter, HTTPException, Query, status

from app.application.use_cases.library import get_reader_category
from app.domain.exceptions import InvalidArgumentError
from app.interfaces.api.schemas import ReaderCategoryRead

router = APIRouter(prefix="/readers", tags=["readers"])


@router.get("/category", response_model=ReaderCategoryRead)
def read_category(books_read: int = Query(...)):
    """Clasifica a un lector según la cantidad de libros leídos."""

    try:
        category = get_reader_category(books_read)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return ReaderCategoryRead(books_read=books_read, category=category)

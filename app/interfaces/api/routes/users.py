"""Rutas para consultar usuarios."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.use_cases.users import get_user_name as get_user_name_uc
from app.domain.exceptions import UserNotFoundError
from app.domain.repositories import UserRepository
from app.interfaces.api.dependencies import get_user_repository
from app.interfaces.api.schemas import UserNameRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}/name", response_model=UserNameRead)
def read_user_name(
    user_id: str,
    repository: UserRepository = Depends(get_user_repository),
):
    """Obtiene el nombre del usuario identificado por ``user_id``."""

    try:
        name = get_user_name_uc(repository, user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return UserNameRead(id=user_id, name=name)

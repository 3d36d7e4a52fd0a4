"""Use case for resolving a user's display name."""

import logging

from app.domain.exceptions import UserNotFoundError
from app.domain.repositories import UserRepository
from app.domain.services import UserService

logger = logging.getLogger(__name__)


def get_user_name(repository: UserRepository, user_id: str) -> str:
    """Return the name of ``user_id`` or raise ``UserNotFoundError``."""

    service = UserService(repository)
    try:
        return service.get_user_name(user_id)
    except UserNotFoundError:
        logger.info("Usuario %s no encontrado", user_id)
        raise

"""Service resolving user names through a repository."""

from __future__ import annotations

from app.domain.exceptions import UserNotFoundError
from app.domain.repositories import UserRepository


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    def get_user_name(self, user_id: str | None) -> str:
        """Return the name of the user or raise ``UserNotFoundError``."""

        user = self.repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user.name

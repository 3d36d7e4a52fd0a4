"""In-memory storage for user data."""

from __future__ import annotations

from collections.abc import Iterable

from app.domain.entities import User


class InMemoryUserRepository:
    """Provide lookups over a fixed collection of users."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: dict[str, User] = {}
        for user in users:
            self.add(user)

    def find_by_id(self, user_id: str | None) -> User | None:
        if user_id is None:
            return None
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        if user.id in self._users:
            msg = f"User with id {user.id} already exists"
            raise ValueError(msg)
        self._users[user.id] = user
        return user

    @classmethod
    def from_mapping(cls, names_by_id: dict[str, str]) -> "InMemoryUserRepository":
        """Build a repository from an ``{id: name}`` mapping."""

        return cls(User(id=user_id, name=name) for user_id, name in names_by_id.items())

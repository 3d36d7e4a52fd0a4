"""Repository contracts the domain services depend on."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from app.domain.entities import User


@runtime_checkable
class UserRepository(Protocol):
    """Lookup capability for users, implemented by the infrastructure layer."""

    def find_by_id(self, user_id: str | None) -> User | None:
        """Return the user identified by ``user_id`` or ``None`` when absent."""


__all__ = ["UserRepository"]

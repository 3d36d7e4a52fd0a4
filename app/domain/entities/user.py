"""Domain entity representing a library user."""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Minimal attributes needed to greet a user by name."""

    id: str
    name: str

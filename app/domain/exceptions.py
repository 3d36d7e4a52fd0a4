"""Domain level errors raised by the library services."""


class LibraryError(ValueError):
    """Base error for rule violations detected by the domain services."""


class InvalidArgumentError(LibraryError):
    """Raised when an operation receives a value outside its allowed range."""


class UserNotFoundError(LibraryError):
    """Raised when the user repository has no record for the requested id."""

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


__all__ = ["InvalidArgumentError", "LibraryError", "UserNotFoundError"]

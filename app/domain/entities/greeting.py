from dataclasses import dataclass


@dataclass(frozen=True)
class Greeting:
    """Represents the message returned by the API root endpoint."""

    message: str

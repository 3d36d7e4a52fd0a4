"""Use cases for producing greeting messages."""

from app.domain.entities.greeting import Greeting


DEFAULT_GREETING = "Welcome to the library"


def create_greeting(app_name: str | None = None) -> Greeting:
    """Return the welcome message for the configured application name.

    When no name is provided, a generic greeting is returned.
    """

    if app_name:
        message = f"Welcome to {app_name}"
    else:
        message = DEFAULT_GREETING

    return Greeting(message=message)

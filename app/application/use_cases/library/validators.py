"""Common validation helpers for library use cases."""


def normalize_title(title: str) -> str:
    """Return ``title`` without surrounding whitespace."""

    return title.strip()

"""General utility functions."""


def is_blank(value: str | None) -> bool:
    """Returns True when the value is None, empty or only whitespace."""
    return value is None or not value.strip()


def is_not_blank(value: str | None) -> bool:
    """Returns True when the value contains at least one non-space character."""
    return not is_blank(value)

"""Errors raised by the duration codec."""

from typing import Any


class InvalidDuration(ValueError):
    """A value could not be turned into a duration.

    The offending input is kept on ``value`` so callers can report it
    as a field-level validation error.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value

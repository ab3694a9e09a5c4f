"""
Domain exceptions raised by the service layer.

They carry only a human readable message; the HTTP layer decides how
each kind is reported (see ``api/errors.py``).
"""


class BusinessError(Exception):
    """A business rule was violated (duplicate isbn, double loan)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IllegalArgumentError(ValueError):
    """An operation was invoked with a missing or invalid argument."""


class DataIntegrityError(Exception):
    """The store rejected a write because it would break a unique constraint."""

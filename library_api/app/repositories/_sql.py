"""Small SQL helpers shared by the repositories."""

import sqlite3

from library_api.app.core.exceptions import DataIntegrityError


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so ``value`` is matched literally (ESCAPE '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def raise_if_unique_violation(exc: sqlite3.IntegrityError) -> None:
    """Re-raise UNIQUE constraint failures as ``DataIntegrityError``.

    Other integrity errors (foreign keys, NOT NULL) are left for the
    caller to propagate unchanged.
    """
    if "UNIQUE constraint failed" in str(exc):
        raise DataIntegrityError(str(exc)) from exc


# SQLite INTEGER is a signed 64-bit value.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


def fits_integer(value: int) -> bool:
    """True if ``value`` can be bound as an SQLite INTEGER."""
    return SQLITE_MIN_INTEGER <= value <= SQLITE_MAX_INTEGER

"""Curated messages for :mod:`sqlite3` exceptions."""

from __future__ import annotations

import logging
import sqlite3

from user_error.core.message import UserFacingError
from user_error.infra.table import lookup

logger = logging.getLogger(__name__)

SUMMARY: str = "SQLite has encountered an issue"

SQLITE_ERROR_TABLE: dict[type[Exception], tuple[str, str | None]] = {
    sqlite3.OperationalError: (
        "The database operation could not be carried out",
        "The database file may be missing, locked by another process, or read-only.",
    ),
    sqlite3.IntegrityError: (
        "A database constraint was violated",
        "A UNIQUE, NOT NULL, CHECK or FOREIGN KEY constraint rejected the change.",
    ),
    sqlite3.ProgrammingError: (
        "The SQL statement or its parameters are invalid",
        None,
    ),
    sqlite3.DataError: (
        "A value could not be stored in the database",
        "e.g., a value that is out of range or too large for its column.",
    ),
    sqlite3.NotSupportedError: (
        "The requested feature is not supported by this SQLite build",
        None,
    ),
    sqlite3.InterfaceError: (
        "The SQLite interface was misused",
        None,
    ),
    sqlite3.InternalError: (
        "SQLite reported an internal error",
        None,
    ),
    sqlite3.DatabaseError: (
        "The database reported an error",
        "The file may not be a database, or it may be corrupted.",
    ),
    sqlite3.Warning: (
        "SQLite issued a warning",
        None,
    ),
    sqlite3.Error: (
        "Underlying SQLite call failed",
        None,
    ),
}


def _error_code_line(exc: Exception) -> str | None:
    # sqlite_errorname/sqlite_errorcode are only populated on Python 3.11+.
    name = getattr(exc, "sqlite_errorname", None)
    if name is None:
        return None
    return f"SQLite error code: {name} ({getattr(exc, 'sqlite_errorcode', '?')})"


def from_sqlite_error(exc: Exception) -> UserFacingError:
    """Convert a :class:`sqlite3.Error` (or ``sqlite3.Warning``) into a message."""
    entry = lookup(SQLITE_ERROR_TABLE, type(exc))
    reason, help_text = entry if entry is not None else ("Underlying SQLite call failed", None)
    reasons = [reason]
    detail = str(exc)
    if detail:
        reasons.append(detail)

    code_line = _error_code_line(exc)
    if code_line is not None:
        help_text = f"{help_text}\n{code_line}" if help_text else code_line

    logger.debug("Converted %s into a SQLite message", type(exc).__name__)
    return UserFacingError(SUMMARY, reasons, help_text).attach_original(exc)

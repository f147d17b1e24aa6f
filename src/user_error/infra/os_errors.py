"""Curated messages for :class:`OSError` and its subclasses."""

from __future__ import annotations

import logging

from user_error.core.message import UserFacingError
from user_error.infra.table import lookup

logger = logging.getLogger(__name__)

GENERIC_SUMMARY: str = "An I/O operation failed"

# exception class -> (reason, help text)
OS_ERROR_TABLE: dict[type[OSError], tuple[str, str | None]] = {
    FileNotFoundError: (
        "The file or directory does not exist",
        "Check the path for typos, or create the file first.",
    ),
    FileExistsError: (
        "A file or directory already exists at that path",
        "Remove or rename the existing entry, or choose another path.",
    ),
    PermissionError: (
        "Permission denied",
        "Check the file permissions, or run the command as a user with access.",
    ),
    IsADirectoryError: (
        "Expected a file but found a directory",
        None,
    ),
    NotADirectoryError: (
        "Expected a directory but found a file",
        None,
    ),
    TimeoutError: (
        "The operation timed out",
        "Try again; the resource may be temporarily unavailable.",
    ),
    InterruptedError: (
        "The operation was interrupted by a signal",
        "Try again.",
    ),
    BlockingIOError: (
        "The operation would block on a non-blocking resource",
        None,
    ),
    BrokenPipeError: (
        "The other end of the pipe was closed",
        None,
    ),
    ConnectionRefusedError: (
        "The connection was refused",
        "Make sure the service is running and listening on the expected address.",
    ),
    ConnectionResetError: (
        "The connection was reset by the peer",
        "Try again in a few moments.",
    ),
    ConnectionAbortedError: (
        "The connection was aborted",
        "Try again in a few moments.",
    ),
    ConnectionError: (
        "A connection error occurred",
        "Check your network connection.",
    ),
    ProcessLookupError: (
        "The process does not exist",
        None,
    ),
    ChildProcessError: (
        "An operation on a child process failed",
        None,
    ),
}


def _summary_for(exc: OSError) -> str:
    if exc.filename is None:
        return GENERIC_SUMMARY
    summary = f"Failed to access '{exc.filename}'"
    if exc.filename2 is not None:
        summary += f" -> '{exc.filename2}'"
    return summary


def from_os_error(exc: OSError) -> UserFacingError:
    """Convert *exc* into a message using :data:`OS_ERROR_TABLE`.

    The operating system's own description (``strerror``) is kept as a
    second reason when it adds something to the curated one.
    """
    entry = lookup(OS_ERROR_TABLE, type(exc))
    detail = exc.strerror or str(exc)
    if entry is None:
        logger.debug("No curated entry for %s", type(exc).__name__)
        return UserFacingError(_summary_for(exc), [detail]).attach_original(exc)

    reason, help_text = entry
    reasons = [reason]
    if detail and detail != reason:
        reasons.append(detail)
    return UserFacingError(_summary_for(exc), reasons, help_text).attach_original(exc)

"""Resolve the running program's name for placeholder summaries."""

from __future__ import annotations

import sys
from pathlib import Path

DEFAULT_PROCESS_NAME: str = "The application"
"""Used when the invocation name cannot be determined."""

_INTERPRETER_FLAGS: frozenset[str] = frozenset({"-c", "-m"})
"""``sys.argv[0]`` values that name an interpreter mode, not a program."""


def process_name() -> str:
    """Return the name the program was invoked as.

    This is the file stem of ``sys.argv[0]``, except under
    ``python -m package`` where ``sys.argv[0]`` points at the package's
    ``__main__.py`` and the package directory name is used instead.
    ``sys.argv`` is read on every call so that embedding applications
    which rewrite it after import are honoured.
    """
    argv = getattr(sys, "argv", None)
    if not argv or not argv[0] or argv[0] in _INTERPRETER_FLAGS:
        return DEFAULT_PROCESS_NAME
    path = Path(argv[0])
    if path.stem == "__main__":
        return path.parent.name or DEFAULT_PROCESS_NAME
    return path.stem or DEFAULT_PROCESS_NAME


def default_summary() -> str:
    """Summary used when a message is created without one."""
    return f"{process_name()} encountered an unknown error"

"""Reusable top-level error boundary.

Wrap the body of a command-line program in :func:`error_boundary` and
every exception that escapes it is reported as a formatted message on
standard error, followed by exit status 1::

    def main() -> None:
        with error_boundary():
            run()
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from user_error.core.style import MessageStyle
from user_error.infra.convert import to_user_error

logger = logging.getLogger(__name__)


@contextmanager
def error_boundary(
    style: MessageStyle | None = None,
    file: TextIO | None = None,
) -> Iterator[None]:
    """Report any escaping ``Exception`` and exit with status 1.

    ``SystemExit`` and ``KeyboardInterrupt`` derive from ``BaseException``
    and pass through untouched.
    """
    try:
        yield
    except Exception as exc:
        logger.debug("Error boundary caught %s", type(exc).__name__, exc_info=True)
        to_user_error(exc).print_and_exit(file=file, style=style)

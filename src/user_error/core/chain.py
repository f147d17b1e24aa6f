"""Causal chain extraction.

A chain is walked from the outermost error towards its root cause.
Reasons derived from it keep that walk order: the immediate cause comes
first and the root cause last.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from user_error.core.protocols import ErrorSource

logger = logging.getLogger(__name__)


def display(err: object) -> str:
    """Return the user-facing text of *err*.

    Exceptions raised without a message fall back to their class name.
    """
    text = str(err)
    if not text and isinstance(err, BaseException):
        return type(err).__name__
    return text


def cause_of(err: object) -> object | None:
    """Return the immediate cause of *err*, or ``None``.

    For exceptions this follows the same rule as :mod:`traceback`: an
    explicit ``raise ... from`` cause wins, otherwise the implicit
    context is used unless it was suppressed with ``from None``.
    """
    if isinstance(err, BaseException):
        if err.__cause__ is not None:
            return err.__cause__
        if err.__suppress_context__:
            return None
        return err.__context__
    if isinstance(err, ErrorSource) and callable(err.source):
        return err.source()
    return None


def iter_causes(err: object) -> Iterator[object]:
    """Yield every cause of *err*, outermost first.

    Iteration stops early if the chain loops back on itself.
    """
    seen = {id(err)}
    cause = cause_of(err)
    while cause is not None and id(cause) not in seen:
        seen.add(id(cause))
        yield cause
        cause = cause_of(cause)


def causal_reasons(err: object) -> list[str]:
    """Display texts of all causes of *err* in walk order."""
    reasons = [display(cause) for cause in iter_causes(err)]
    logger.debug("Extracted %d cause(s) from %s", len(reasons), type(err).__name__)
    return reasons

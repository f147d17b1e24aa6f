"""Protocols (interfaces) consumed by the core layer.

Python exceptions already describe their own cause chain through
``__cause__`` and ``__context__``.  Error values that are *not*
exceptions (result objects returned by a foreign library, for example)
can take part in chain extraction by satisfying :class:`ErrorSource`
structurally: no explicit inheritance required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorSource(Protocol):
    """Contract for non-exception error values with a cause chain.

    ``str(value)`` provides the display text; :meth:`source` returns the
    immediate cause, or ``None`` at the root of the chain.
    """

    def source(self) -> object | None:
        """Return the error that directly caused this one, if any."""
        ...  # pragma: no cover

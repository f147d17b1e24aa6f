"""Core layer — the message model, chain extraction and styling.

Rules
-----
* No imports from ``cli`` or ``infra``.
* Output happens only through ``UserFacingError.print``,
  ``print_other_errors`` and ``print_and_exit``, which write the
  rendered text to a stream directly: no ``print()``, no Rich console.
* Rendering is deterministic: same fields and style, same bytes.
"""

from user_error.core.chain import causal_reasons, cause_of, display, iter_causes
from user_error.core.message import UserFacingError
from user_error.core.protocols import ErrorSource
from user_error.core.style import DEFAULT_STYLE, PLAIN_STYLE, MessageStyle

__all__: list[str] = [
    "DEFAULT_STYLE",
    "ErrorSource",
    "MessageStyle",
    "PLAIN_STYLE",
    "UserFacingError",
    "causal_reasons",
    "cause_of",
    "display",
    "iter_causes",
]

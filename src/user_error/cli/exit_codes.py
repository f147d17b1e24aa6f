"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

from user_error.core.message import EXIT_STATUS

SUCCESS: int = 0
"""Clean exit — only ``--help`` and ``--version`` end this way."""

GENERAL_ERROR: int = EXIT_STATUS
"""A message was reported to the user."""

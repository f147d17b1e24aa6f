"""Allow ``python -m user_error`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m user_error`` behaves identically to the ``user-error``
console script.
"""

from __future__ import annotations

from user_error.cli.app import cli

if __name__ == "__main__":
    cli()

"""CLI layer — argument parsing, the error boundary and exit codes.

This package is the outermost layer of the library.  It may import
from ``core``, ``infra``, and ``utils``, but no other layer may import
from ``cli``.
"""

from user_error.cli.boundary import error_boundary

__all__: list[str] = ["error_boundary"]

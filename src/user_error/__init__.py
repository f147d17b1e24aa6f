"""user-error — well-formatted, coloured error messages for CLI users.

Build a :class:`UserFacingError` from a summary or from any exception,
annotate it with reasons and help text, and print it to standard error.
"""

from user_error.cli.boundary import error_boundary
from user_error.core.message import UserFacingError
from user_error.core.protocols import ErrorSource
from user_error.core.style import DEFAULT_STYLE, PLAIN_STYLE, MessageStyle
from user_error.infra.convert import to_user_error
from user_error.infra.editor_errors import from_editor_error
from user_error.infra.os_errors import from_os_error
from user_error.infra.sqlite_errors import from_sqlite_error
from user_error.version import __version__

__all__: list[str] = [
    "DEFAULT_STYLE",
    "ErrorSource",
    "MessageStyle",
    "PLAIN_STYLE",
    "UserFacingError",
    "__version__",
    "error_boundary",
    "from_editor_error",
    "from_os_error",
    "from_sqlite_error",
    "to_user_error",
]

"""Infrastructure layer — conversion of foreign error families.

Each adapter is a static table from exception class to curated text.
Adapters never print; they only build messages.

Rules
-----
* No imports from ``cli``.
* Conversion never raises.
"""

from user_error.infra.convert import to_user_error
from user_error.infra.editor_errors import from_editor_error
from user_error.infra.os_errors import from_os_error
from user_error.infra.sqlite_errors import from_sqlite_error

__all__: list[str] = [
    "from_editor_error",
    "from_os_error",
    "from_sqlite_error",
    "to_user_error",
]

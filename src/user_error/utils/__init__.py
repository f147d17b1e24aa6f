"""Shared utilities — process introspection helpers.

Rules
-----
* No business logic.
* No output.
* Importable by any layer.
"""

from user_error.utils.process import DEFAULT_PROCESS_NAME, default_summary, process_name

__all__: list[str] = ["DEFAULT_PROCESS_NAME", "default_summary", "process_name"]

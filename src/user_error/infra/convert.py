"""Generic conversion of arbitrary values into :class:`UserFacingError`.

:func:`to_user_error` is a :func:`functools.singledispatch` function, so
applications can register converters for their own error types::

    @to_user_error.register(MyLibraryError)
    def _(err: MyLibraryError) -> UserFacingError:
        return UserFacingError("MyLibrary failed", [err.detail])
"""

from __future__ import annotations

import sqlite3
from functools import singledispatch

from user_error.core.message import UserFacingError
from user_error.infra.os_errors import from_os_error
from user_error.infra.sqlite_errors import from_sqlite_error


@singledispatch
def to_user_error(value: object) -> UserFacingError:
    """Convert *value* into a message.  Never fails.

    Values without a registered converter go through
    :meth:`UserFacingError.from_error`.
    """
    return UserFacingError.from_error(value)


@to_user_error.register(UserFacingError)
def _from_user_error(value: UserFacingError) -> UserFacingError:
    return value


@to_user_error.register(str)
def _from_str(value: str) -> UserFacingError:
    return UserFacingError(value)


@to_user_error.register(OSError)
def _from_os_error(value: OSError) -> UserFacingError:
    return from_os_error(value)


@to_user_error.register(sqlite3.Error)
@to_user_error.register(sqlite3.Warning)
def _from_sqlite_error(value: Exception) -> UserFacingError:
    return from_sqlite_error(value)

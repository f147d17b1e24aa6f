"""Lookup helper shared by the curated conversion tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

T = TypeVar("T")


def lookup(table: Mapping[type, T], exc_type: type) -> T | None:
    """Return the entry for the nearest class of *exc_type* in *table*.

    The MRO is walked so that, for example, ``BrokenPipeError`` falls
    back to the ``ConnectionError`` entry when it has none of its own.
    """
    for klass in exc_type.__mro__:
        if klass in table:
            return table[klass]
    return None

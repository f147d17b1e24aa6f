"""Shared pytest fixtures and configuration for the user-error test suite.

Guidelines
----------
* Rendering tests compare exact strings, escape sequences included.
* Output is captured with ``capsys``; nothing is written to a real tty.
* Tests that depend on the placeholder summary pin ``sys.argv``.
"""

from __future__ import annotations

import sys

import pytest


@pytest.fixture
def program_name(monkeypatch: pytest.MonkeyPatch) -> str:
    """Pin ``sys.argv[0]`` so placeholder summaries are predictable."""
    monkeypatch.setattr(sys, "argv", ["/usr/local/bin/builder.py", "--flag"])
    return "builder"

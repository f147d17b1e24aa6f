"""Curated messages for failures while launching a text editor.

Applications that open ``$VISUAL``/``$EDITOR`` through :mod:`subprocess`
can hand whatever was raised to :func:`from_editor_error`.
"""

from __future__ import annotations

import logging
import subprocess

from user_error.core.chain import display
from user_error.core.message import UserFacingError

logger = logging.getLogger(__name__)

SUMMARY: str = "Failed to open the text editor"

EDITOR_HELP: str = "Set the VISUAL or EDITOR environment variable to an installed editor."


def from_editor_error(exc: BaseException, editor: str | None = None) -> UserFacingError:
    """Convert an editor launch failure into a message.

    Parameters
    ----------
    exc:
        What the launch raised.
    editor:
        The command that was run, used in the reasons when known.
    """
    return _convert(exc, editor or "the editor").attach_original(exc)


def _convert(exc: BaseException, name: str) -> UserFacingError:
    if isinstance(exc, FileNotFoundError):
        return UserFacingError(
            SUMMARY,
            [f"Could not find {name}", "The editor does not appear to be installed"],
            EDITOR_HELP,
        )
    if isinstance(exc, PermissionError):
        return UserFacingError(
            SUMMARY,
            [f"Could not run {name}", "Permission denied"],
            "Check that the editor is executable.",
        )
    if isinstance(exc, subprocess.CalledProcessError):
        return UserFacingError(
            SUMMARY,
            [f"{name} exited with status {exc.returncode}"],
            "Any changes made in the editor were discarded.",
        )
    if isinstance(exc, subprocess.TimeoutExpired):
        return UserFacingError(
            SUMMARY,
            [f"{name} did not exit within {exc.timeout:g} seconds"],
            None,
        )

    logger.debug("No curated editor entry for %s", type(exc).__name__)
    return UserFacingError(SUMMARY, [display(exc)], EDITOR_HELP)

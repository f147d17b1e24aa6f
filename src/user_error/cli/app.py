"""CLI application entry point for ``user-error``.

Prints a formatted error message built from the command line, which is
handy in shell scripts that want the same look as Python programs
using the library::

    user-error "Failed to build project" -r "main.db not found" \\
        --help-text "Try: touch main.db"

Architecture notes
------------------
* No rendering logic lives here — the message model does all of it.
* :func:`cli` is the error boundary; :func:`main` returns the exit code
  so it can be tested without terminating the interpreter.
"""

from __future__ import annotations

import argparse
import sys

from user_error.cli import exit_codes
from user_error.cli.boundary import error_boundary
from user_error.core.message import UserFacingError
from user_error.core.style import DEFAULT_STYLE, PLAIN_STYLE
from user_error.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="user-error",
        description="Print a formatted error message to standard error and exit 1.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "summary",
        nargs="?",
        default="",
        help="One-line description of the failure.",
    )
    parser.add_argument(
        "-r",
        "--reason",
        dest="reasons",
        action="append",
        default=None,
        metavar="REASON",
        help="A cause of the failure.  Repeat for several reasons.",
    )
    parser.add_argument(
        "--help-text",
        default=None,
        metavar="TEXT",
        help="Guidance shown dimmed after the reasons.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Do not emit colour escape sequences.",
    )
    return parser


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the user-error CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    message = UserFacingError(args.summary, args.reasons, args.help_text)
    message.print(style=PLAIN_STYLE if args.plain else DEFAULT_STYLE)
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Entry point for the ``user-error`` console script."""
    with error_boundary():
        sys.exit(main())

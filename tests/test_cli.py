"""Tests for the CLI layer (cli/app.py and cli/boundary.py).

Exit paths are observed through ``SystemExit``; output through
``capsys``.
"""

from __future__ import annotations

import errno
import io
import sys

import pytest

from user_error.cli import exit_codes
from user_error.cli.app import cli, main
from user_error.cli.boundary import error_boundary
from user_error.core.message import UserFacingError
from user_error.core.style import PLAIN_STYLE


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:
    def test_summary_only(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["--plain", "Failed to build project"])
        assert code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "Error: Failed to build project\n"

    def test_reasons_in_argument_order(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--plain", "Failed", "-r", "first", "--reason", "second", "--help-text", "Try again"])
        assert capsys.readouterr().err == "Error: Failed\n- first\n- second\nTry again\n"

    def test_coloured_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["Failed"])
        assert capsys.readouterr().err == UserFacingError("Failed").render() + "\n"

    def test_missing_summary_uses_placeholder(
        self, program_name: str, capsys: pytest.CaptureFixture[str],
    ) -> None:
        main(["--plain"])
        assert capsys.readouterr().err == (
            f"Error: {program_name} encountered an unknown error\n"
        )

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# cli() entry point
# ---------------------------------------------------------------------------

class TestCliEntryPoint:
    def test_exits_with_general_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr(sys, "argv", ["user-error", "--plain", "Failed"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == "Error: Failed\n"

    def test_unexpected_exception_is_reported(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from user_error.cli import app as app_module

        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaboom")

        monkeypatch.setattr(app_module, "main", _boom)
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "kaboom" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# error_boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def test_no_error_no_output(self) -> None:
        buffer = io.StringIO()
        with error_boundary(file=buffer):
            pass
        assert buffer.getvalue() == ""

    def test_user_facing_error_reported_verbatim(self) -> None:
        buffer = io.StringIO()
        with pytest.raises(SystemExit) as exc_info:
            with error_boundary(style=PLAIN_STYLE, file=buffer):
                raise UserFacingError("Failed", ["why"], "Try again")
        assert exc_info.value.code == 1
        assert buffer.getvalue() == "Error: Failed\n- why\nTry again\n"

    def test_chained_exception_reported_with_reasons(self) -> None:
        buffer = io.StringIO()
        with pytest.raises(SystemExit):
            with error_boundary(style=PLAIN_STYLE, file=buffer):
                try:
                    raise ValueError("port must be a number")
                except ValueError as exc:
                    raise RuntimeError("Invalid configuration") from exc
        assert buffer.getvalue() == "Error: Invalid configuration\n- port must be a number\n"

    def test_oserror_uses_curated_text(self) -> None:
        buffer = io.StringIO()
        with pytest.raises(SystemExit):
            with error_boundary(style=PLAIN_STYLE, file=buffer):
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", "main.db")
        assert buffer.getvalue().startswith("Error: Failed to access 'main.db'\n")

    def test_keyboard_interrupt_passes_through(self) -> None:
        buffer = io.StringIO()
        with pytest.raises(KeyboardInterrupt):
            with error_boundary(file=buffer):
                raise KeyboardInterrupt
        assert buffer.getvalue() == ""

    def test_system_exit_passes_through(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            with error_boundary():
                sys.exit(0)
        assert exc_info.value.code == 0

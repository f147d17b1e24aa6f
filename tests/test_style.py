"""Tests for render-time styling (core/style.py)."""

from __future__ import annotations

import dataclasses

import pytest
from rich.style import Style

from user_error.core.message import UserFacingError
from user_error.core.style import DEFAULT_STYLE, PLAIN_STYLE, MessageStyle


class TestMessageStyle:
    @pytest.mark.parametrize(
        ("field", "text", "expected"),
        [
            ("label", "Error:", "\x1b[1;37;41mError:\x1b[0m"),
            ("summary", "boom", "\x1b[1;31mboom\x1b[0m"),
            ("bullet", "-", "\x1b[33m-\x1b[0m"),
            ("reason", "why", "\x1b[1;37mwhy\x1b[0m"),
            ("help_text", "hint", "\x1b[2;37mhint\x1b[0m"),
        ],
    )
    def test_default_escape_sequences(self, field: str, text: str, expected: str) -> None:
        assert DEFAULT_STYLE.apply(getattr(DEFAULT_STYLE, field), text) == expected

    def test_plain_style_emits_no_escapes(self) -> None:
        for field in ("label", "summary", "bullet", "reason", "help_text"):
            assert PLAIN_STYLE.apply(getattr(PLAIN_STYLE, field), "text") == "text"

    def test_empty_text_is_not_wrapped(self) -> None:
        assert DEFAULT_STYLE.apply(DEFAULT_STYLE.summary, "") == ""

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_STYLE.label_text = "Oops:"  # type: ignore[misc]

    def test_replace_returns_new_style(self) -> None:
        custom = DEFAULT_STYLE.replace(label_text="Fatal:", bullet_text="*")
        assert custom.label_text == "Fatal:"
        assert custom.bullet_text == "*"
        assert DEFAULT_STYLE.label_text == "Error:"


class TestCustomStyleAtRenderTime:
    def test_custom_glyphs(self) -> None:
        style = PLAIN_STYLE.replace(label_text="Fatal:", bullet_text="*")
        err = UserFacingError("Failed", ["why"])
        assert err.render(style) == "Fatal: Failed\n* why"

    def test_custom_colour(self) -> None:
        style = MessageStyle(summary=Style(color="green"))
        assert UserFacingError("ok").render_summary(style).endswith("\x1b[32mok\x1b[0m")

    def test_styles_do_not_leak_between_calls(self) -> None:
        err = UserFacingError("Failed", ["why"])
        err.render(PLAIN_STYLE)
        assert err.render() != err.render(PLAIN_STYLE)

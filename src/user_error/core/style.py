"""Render-time styling for :class:`~user_error.core.message.UserFacingError`.

Styles are plain values handed to ``render()`` rather than module-level
state, so two callers can render the same message differently without
affecting each other.  Every styled run is turned into an ANSI SGR
sequence with :meth:`rich.style.Style.render` using the 8-colour
palette; no terminal detection takes place.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from rich.color import ColorSystem
from rich.style import Style

ANSI_COLOR_SYSTEM: ColorSystem = ColorSystem.STANDARD
"""Palette used for every escape sequence the library emits."""


@dataclass(frozen=True, slots=True)
class MessageStyle:
    """Style tokens for the three segments of a rendered message."""

    label: Style = Style(bold=True, color="white", bgcolor="red")
    """The ``Error:`` header."""

    summary: Style = Style(bold=True, color="red")

    bullet: Style = Style(color="yellow")
    """The glyph in front of each reason."""

    reason: Style = Style(bold=True, color="white")

    help_text: Style = Style(dim=True, color="white")

    label_text: str = "Error:"

    bullet_text: str = "-"

    def apply(self, style: Style, text: str) -> str:
        """Wrap *text* in the escape sequence for *style*.

        Empty text and a null style both come back unchanged.
        """
        return style.render(text, color_system=ANSI_COLOR_SYSTEM)

    def replace(self, **changes: object) -> MessageStyle:
        """Return a copy with *changes* applied."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]


DEFAULT_STYLE: MessageStyle = MessageStyle()
"""Bold white-on-red label, bold red summary, yellow bullets, dim help."""

PLAIN_STYLE: MessageStyle = MessageStyle(
    label=Style.null(),
    summary=Style.null(),
    bullet=Style.null(),
    reason=Style.null(),
    help_text=Style.null(),
)
"""Same layout as :data:`DEFAULT_STYLE` without any escape sequences."""

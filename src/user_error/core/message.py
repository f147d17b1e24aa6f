"""The message model: a summary, its reasons and optional help text.

:class:`UserFacingError` is an ordinary exception, so it can be raised
deep inside an application and caught at the outer error boundary,
where it is rendered to standard error::

    Error: Failed to build project
    - Database could not be parsed
    - File "main.db" not found
    Try: touch main.db

Reason ordering
---------------
Reasons always read from the outermost context down to the root cause.
:meth:`UserFacingError.from_error` records causes in walk order,
:meth:`~UserFacingError.add_reason` appends a deeper detail, and
:meth:`~UserFacingError.push_summary_as_reason` moves the old summary to
the front because it is now the outermost context.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from typing import NoReturn, TextIO

from user_error.core.chain import causal_reasons, display
from user_error.core.style import DEFAULT_STYLE, MessageStyle
from user_error.utils.process import default_summary

logger = logging.getLogger(__name__)

EXIT_STATUS: int = 1
"""Status passed to :func:`sys.exit` by :meth:`UserFacingError.print_and_exit`."""


def _normalise_summary(summary: str) -> str:
    return summary if summary and summary.strip() else default_summary()


class UserFacingError(Exception):
    """An error meant to be read by a person rather than a developer.

    Parameters
    ----------
    summary:
        One-line headline.  Empty or blank text is replaced with
        ``"<program> encountered an unknown error"``.
    reasons:
        Supporting causes, outermost first.  An empty iterable is the
        same as passing ``None``.
    help_text:
        Guidance shown last, dimmed.  May span several lines.
    """

    def __init__(
        self,
        summary: str = "",
        reasons: Iterable[str] | None = None,
        help_text: str | None = None,
    ) -> None:
        self._summary = _normalise_summary(summary)
        super().__init__(self._summary)
        self._reasons: list[str] | None = list(reasons) if reasons is not None else None
        if not self._reasons:
            self._reasons = None
        self.help_text: str | None = help_text
        self._original_errors: list[object] = []

    @classmethod
    def from_error(cls, err: object) -> UserFacingError:
        """Build a message from any error value.

        The summary is the display text of *err* and the reasons are the
        display texts of its causes, immediate cause first.  *err* itself
        is kept, see :attr:`original_errors`.
        """
        return cls(display(err), causal_reasons(err)).attach_original(err)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    @property
    def summary(self) -> str:
        return self._summary

    @property
    def reasons(self) -> tuple[str, ...] | None:
        """The recorded reasons, or ``None`` when there are none."""
        return tuple(self._reasons) if self._reasons else None

    @property
    def original_errors(self) -> tuple[object, ...]:
        """Errors this message was converted from, in the order attached."""
        return tuple(self._original_errors)

    def __str__(self) -> str:
        return self._summary

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(summary={self._summary!r}, "
            f"reasons={self.reasons!r}, help_text={self.help_text!r})"
        )

    def __reduce__(self) -> tuple[type[UserFacingError], tuple[str, list[str] | None, str | None]]:
        return type(self), (self._summary, self._reasons, self.help_text)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_summary(self, summary: str) -> None:
        """Replace the summary.  Reasons are left untouched."""
        self._summary = _normalise_summary(summary)
        self.args = (self._summary,)

    def push_summary_as_reason(self, summary: str) -> None:
        """Replace the summary, keeping the old one as the first reason.

        Useful when an error converted from a lower layer is re-described
        in terms the user understands without losing the original text.
        """
        previous = self._summary
        self._reasons = [previous, *(self._reasons or ())]
        self.set_summary(summary)

    def add_reason(self, reason: str) -> None:
        """Append *reason* after the existing ones."""
        if self._reasons is None:
            self._reasons = []
        self._reasons.append(reason)

    def clear_reasons(self) -> None:
        self._reasons = None

    def set_help_text(self, help_text: str) -> None:
        self.help_text = help_text

    def clear_help_text(self) -> None:
        self.help_text = None

    def with_reason(self, reason: str) -> UserFacingError:
        """Fluent form of :meth:`add_reason`."""
        self.add_reason(reason)
        return self

    def with_help_text(self, help_text: str) -> UserFacingError:
        """Fluent form of :meth:`set_help_text`."""
        self.set_help_text(help_text)
        return self

    def attach_original(self, err: object) -> UserFacingError:
        """Remember *err* as an error this message was converted from.

        The first exception attached also becomes ``__cause__`` so that
        a traceback of the message still shows where it came from.
        """
        self._original_errors.append(err)
        if isinstance(err, BaseException) and self.__cause__ is None:
            self.__cause__ = err
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_summary(self, style: MessageStyle | None = None) -> str:
        """Return ``Error: <summary>`` with the label and summary styled."""
        style = style or DEFAULT_STYLE
        return (
            f"{style.apply(style.label, style.label_text)} "
            f"{style.apply(style.summary, self._summary)}"
        )

    def render_reasons(self, style: MessageStyle | None = None) -> str:
        """Return one bulleted line per reason, or ``""`` without reasons."""
        if not self._reasons:
            return ""
        style = style or DEFAULT_STYLE
        bullet = style.apply(style.bullet, style.bullet_text)
        return "\n".join(
            f"{bullet} {style.apply(style.reason, reason)}" for reason in self._reasons
        )

    def render_help_text(self, style: MessageStyle | None = None) -> str:
        """Return the dimmed help text, or ``""`` when there is none."""
        if not self.help_text:
            return ""
        style = style or DEFAULT_STYLE
        return style.apply(style.help_text, self.help_text)

    def render(self, style: MessageStyle | None = None) -> str:
        """Render the full message.

        Segments are separated by a single newline; absent segments leave
        no trace in the output.
        """
        segments = (
            self.render_summary(style),
            self.render_reasons(style),
            self.render_help_text(style),
        )
        return "\n".join(segment for segment in segments if segment)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def print(self, file: TextIO | None = None, style: MessageStyle | None = None) -> None:
        """Write the rendered message and a line terminator to *file*.

        *file* defaults to ``sys.stderr`` as it is at call time.
        """
        stream = sys.stderr if file is None else file
        stream.write(self.render(style) + "\n")

    def print_other_errors(self, file: TextIO | None = None) -> None:
        """Write the display text of each original error, one per line.

        Writes nothing when the message was not converted from anything.
        """
        stream = sys.stderr if file is None else file
        for err in self._original_errors:
            stream.write(display(err) + "\n")

    def print_and_exit(
        self,
        file: TextIO | None = None,
        style: MessageStyle | None = None,
    ) -> NoReturn:
        """Print the message and terminate the process with status 1.

        Any cleanup must happen before this call.
        """
        self.print(file=file, style=style)
        logger.debug("Exiting with status %d after reporting: %s", EXIT_STATUS, self._summary)
        sys.exit(EXIT_STATUS)

"""Failure taxonomy for daily-menu extraction.

Every error raised by :mod:`dailymenu` derives from :class:`DailyMenuError`
and carries a stable ``kind`` tag.  Callers are expected to match on the
kind only to decide between retrying and giving up.
"""

from __future__ import annotations


class DailyMenuError(Exception):
    """Base class for all extraction failures."""

    kind = "error"


class TransportError(DailyMenuError):
    """The page could not be fetched (the httpx error is chained)."""

    kind = "transport"


class EncodingError(DailyMenuError):
    """The fetched bytes are not valid UTF-8 text."""

    kind = "encoding"


class ParseError(DailyMenuError):
    """The HTML parser rejected the markup."""

    kind = "parse"


class NotFound(DailyMenuError):
    """An expected marker, element or key is absent from the page.

    Args:
        what: Short name of the missing thing, e.g. ``"state marker"``
            or ``"price"``.
        pattern: The CSS pattern or marker that was searched for.
    """

    kind = "not_found"

    def __init__(self, what: str, pattern: str | None = None) -> None:
        self.what = what
        self.pattern = pattern
        message = f"{what} not found"
        if pattern:
            message = f"{message} (looked for {pattern!r})"
        super().__init__(message)


class MalformedSource(DailyMenuError):
    """A marker was found but its expected boundary was violated."""

    kind = "malformed_source"


class DecodeError(DailyMenuError):
    """The embedded state failed syntax or shape validation."""

    kind = "decode"

"""Extraction of the daily menu from the page's preloaded application state.

The site hydrates its client from a script of the form::

    window.__PRELOADED_STATE__ = JSON.parse("{\\"pages\\": ...}")

The JSON inside the string literal has its quotes escaped as ``\\"`` and
nothing else escaped.  We cut the literal out, undo that one escape and
validate the result against :class:`~dailymenu.models.PreloadedState`.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from dailymenu.document import Document, first_text, select
from dailymenu.errors import DecodeError, MalformedSource, NotFound
from dailymenu.models import DayBlock, PreloadedState

logger = logging.getLogger(__name__)

STATE_MARKER = 'window.__PRELOADED_STATE__ = JSON.parse("'
STATE_TERMINATOR = '")\n'

_ESCAPED_QUOTE = '\\"'


def find_state_script(document: Document) -> str:
    """Return the first script text containing :data:`STATE_MARKER`."""
    for script in select(document, "script"):
        text = first_text(script)
        if text is not None and STATE_MARKER in text:
            return text
    raise NotFound("state marker", STATE_MARKER)


def cut_blob(script: str) -> str:
    """Return the still-escaped JSON between the marker and the terminator."""
    _, sep, tail = script.partition(STATE_MARKER)
    if not sep:
        raise MalformedSource(f"script does not contain {STATE_MARKER!r}")
    blob, sep, _ = tail.partition(STATE_TERMINATOR)
    if not sep:
        raise MalformedSource(
            f"state literal is not terminated by {STATE_TERMINATOR!r}"
        )
    return blob


def unescape(blob: str) -> str:
    """Replace every ``\\"`` with ``"``.  No other escapes are handled."""
    return blob.replace(_ESCAPED_QUOTE, '"')


def decode_state(text: str) -> PreloadedState:
    try:
        return PreloadedState.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeError(f"preloaded state does not match the schema: {exc}") from exc


def extract_state(document: Document) -> list[DayBlock]:
    """Return the day blocks of the first restaurant in the preloaded state.

    Only the first entry of ``pages.restaurant`` is used.  Pages observed
    so far carry exactly one; extra entries are logged and ignored.

    Raises:
        NotFound: no script carries the state (``"state marker"``), or the
            restaurant mapping is empty (``"restaurant"``).
        MalformedSource: the state literal is not terminated.
        DecodeError: the unescaped state is not valid JSON of the
            expected shape.
    """
    blob = cut_blob(find_state_script(document))
    state = decode_state(unescape(blob))

    restaurants = state.pages.restaurant
    if not restaurants:
        raise NotFound("restaurant", "pages.restaurant")
    key, restaurant = next(iter(restaurants.items()))
    if len(restaurants) > 1:
        logger.warning(
            "State holds %d restaurants; using %r and ignoring %s",
            len(restaurants),
            key,
            ", ".join(repr(k) for k in list(restaurants)[1:]),
        )
    logger.debug("Using restaurant %r from preloaded state", key)
    return list(restaurant.sections.daily_menu)

"""Public entry points: page bytes (or a city/restaurant pair) in, menus out."""

from __future__ import annotations

import logging
from typing import Protocol

from dailymenu.config import Strategy, settings
from dailymenu.document import Document, parse
from dailymenu.errors import NotFound
from dailymenu.loader import PageLoader, create_client
from dailymenu.models import DayBlock, Menu
from dailymenu.normalize import to_menus
from dailymenu.state import extract_state
from dailymenu.structural import extract_structure

logger = logging.getLogger(__name__)


class Loader(Protocol):
    async def fetch(self, city: str, restaurant: str) -> bytes: ...


def _extract_auto(document: Document) -> list[DayBlock]:
    try:
        return extract_state(document)
    except NotFound as exc:
        if exc.what != "state marker":
            raise
    logger.info("No preloaded state on page, reading the markup instead")
    return extract_structure(document)


_EXTRACTORS = {
    Strategy.AUTO: _extract_auto,
    Strategy.STATE: extract_state,
    Strategy.STRUCTURAL: extract_structure,
}


def extract_daily_menu(content: bytes, strategy: Strategy = Strategy.AUTO) -> list[Menu]:
    """Extract the daily menus from a fetched page.

    With ``Strategy.AUTO`` the preloaded state is read when the page has
    one; only a missing state marker makes it fall back to the markup.
    Any other failure is raised as-is.

    Returns:
        One :class:`Menu` per day, in page order.
    """
    strategy = Strategy(strategy)
    document = parse(content)
    blocks = _EXTRACTORS[strategy](document)
    logger.debug("Extracted %d day(s) using %s strategy", len(blocks), strategy.value)
    return to_menus(blocks)


async def get_daily_menu(
    city: str,
    restaurant: str,
    *,
    loader: Loader | None = None,
    strategy: Strategy | None = None,
) -> list[Menu]:
    """Fetch a restaurant's daily-menu page and extract its menus.

    Args:
        city: City segment of the restaurant URL, e.g. ``"praha"``.
        restaurant: Restaurant segment of the URL.
        loader: Page loader to use; a short-lived HTTP client is opened
            when omitted.
        strategy: Overrides the configured extraction strategy.

    Raises:
        DailyMenuError: any fetch or extraction failure.
    """
    strategy = strategy or settings.strategy
    if loader is None:
        async with create_client(settings) as client:
            content = await PageLoader(client, settings.site_url).fetch(city, restaurant)
    else:
        content = await loader.fetch(city, restaurant)
    return extract_daily_menu(content, strategy)

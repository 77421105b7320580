"""Extraction of the daily menu from the rendered markup.

Used when the page carries no preloaded state.  The markup looks like::

    <div id="daily-menu-container">
      <div class="tmi-group">
        <div class="tmi-group-name">Tue, 02 Jan</div>
        <div class="tmi-daily">
          <div class="tmi-name">Salad</div>
          <div class="tmi-price"><div class="row">$4</div></div>
        </div>
      </div>
    </div>

Any missing element aborts the whole extraction; partial menus are never
returned.
"""

from __future__ import annotations

import logging

from bs4 import Tag

from dailymenu.document import Document, first_text, select, select_one, select_text
from dailymenu.models import DayBlock, DishRecord

logger = logging.getLogger(__name__)

CONTAINER = "#daily-menu-container"
GROUP = ".tmi-group"
GROUP_NAME = ".tmi-group-name"
DAILY_ITEM = ".tmi-daily"
ITEM_NAME = ".tmi-name"
ITEM_PRICE = ".tmi-price div.row"


def _parse_item(item: Tag) -> DishRecord:
    name = select_text(item, ITEM_NAME, "name")
    # An empty price row is a legitimate empty price.
    price = first_text(select_one(item, ITEM_PRICE, "price")) or ""
    return DishRecord(name=name, display_price=price.strip())


def _parse_group(group: Tag) -> DayBlock:
    date = select_text(group, GROUP_NAME, "group name")
    dishes = tuple(_parse_item(item) for item in select(group, DAILY_ITEM))
    return DayBlock(time_heading=date, dishes=dishes)


def extract_structure(document: Document) -> list[DayBlock]:
    """Return one day block per ``.tmi-group`` in document order.

    Raises:
        NotFound: the container, a group name, an item name or an item
            price is missing (or a group name/item name has no text).
    """
    container = select_one(document, CONTAINER, "daily menu container")
    blocks = [_parse_group(group) for group in select(container, GROUP)]
    logger.debug("Read %d day(s) from markup", len(blocks))
    return blocks

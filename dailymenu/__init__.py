"""Daily menu scraper for restaurant pages on zomato.com.

Usage::

    python -m dailymenu praha lokal-dlouha                  # Print all days
    python -m dailymenu praha lokal-dlouha --speak espeak   # Read today's menu aloud

or from code::

    menus = await get_daily_menu("praha", "lokal-dlouha")
"""

from dailymenu.config import Strategy
from dailymenu.errors import (
    DailyMenuError,
    DecodeError,
    EncodingError,
    MalformedSource,
    NotFound,
    ParseError,
    TransportError,
)
from dailymenu.menu import extract_daily_menu, get_daily_menu
from dailymenu.models import Menu, MenuItem

__all__ = [
    "DailyMenuError",
    "DecodeError",
    "EncodingError",
    "MalformedSource",
    "Menu",
    "MenuItem",
    "NotFound",
    "ParseError",
    "Strategy",
    "TransportError",
    "extract_daily_menu",
    "get_daily_menu",
]

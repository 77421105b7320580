"""Plain-text rendering of daily menus for the console."""

from collections.abc import Sequence

from dailymenu.models import Menu


def format_menus(menus: Sequence[Menu]) -> list[str]:
    """Render *menus* as aligned text lines.

    Each day starts with its date, followed by one line per item::

        Mon, 01 Jan
        Soup         | $5
        Fried cheese | $9

    Descriptions are padded to the widest one across all days.  Returns
    no lines at all when no day has an item.
    """
    widths = [len(item.description) for menu in menus for item in menu.items]
    if not widths:
        return []
    width = max(widths)

    lines: list[str] = []
    for menu in menus:
        lines.append(menu.date)
        for item in menu.items:
            lines.append(f"{item.description.ljust(width)} | {item.price}")
    return lines


def speech_text(menu: Menu) -> str:
    """Text read aloud for one day: each description followed by its price."""
    return "".join(f"{item.description} {item.price} " for item in menu.items)

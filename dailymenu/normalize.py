"""Mapping of extracted day blocks into the public menu model."""

from collections.abc import Iterable

from dailymenu.models import DayBlock, Menu, MenuItem


def to_menus(day_blocks: Iterable[DayBlock]) -> list[Menu]:
    """Convert day blocks to menus, keeping day and dish order as-is."""
    return [
        Menu(
            date=block.time_heading,
            items=tuple(
                MenuItem(description=dish.name, price=dish.display_price)
                for dish in block.dishes
            ),
        )
        for block in day_blocks
    ]

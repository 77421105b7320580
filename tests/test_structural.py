"""Tests for extraction from the rendered markup."""

import pytest

from dailymenu.config import Strategy
from dailymenu.document import parse
from dailymenu.errors import NotFound
from dailymenu.menu import extract_daily_menu
from dailymenu.models import Menu, MenuItem
from dailymenu.structural import ITEM_PRICE, extract_structure


def _container(groups: str) -> bytes:
    return f'<html><body><div id="daily-menu-container">{groups}</div></body></html>'.encode()


def test_single_day_without_price() -> None:
    """Test a page without state: one day, one dish, empty price row."""
    page = _container(
        '<div class="tmi-group">'
        '<div class="tmi-group-name">Tue, 02 Jan</div>'
        '<div class="tmi-daily">'
        '<div class="tmi-name">Salad</div>'
        '<div class="tmi-price"><div class="row"></div></div>'
        "</div>"
        "</div>"
    )

    menus = extract_daily_menu(page)

    assert menus == [
        Menu(date="Tue, 02 Jan", items=(MenuItem(description="Salad", price=""),))
    ]


def test_groups_in_document_order(structural_page) -> None:
    """Test that every group becomes one day, trimmed and in order."""
    menus = extract_daily_menu(structural_page(), Strategy.STRUCTURAL)

    assert [m.date for m in menus] == ["Mon, 01 Jan", "Tue, 02 Jan", "Wed, 03 Jan"]
    assert menus[0].items == (
        MenuItem(description="Soup", price="$5"),
        MenuItem(description="Fried cheese", price="$9"),
    )
    assert menus[2].items == ()


def test_missing_price_aborts_extraction() -> None:
    """Test that an item without a price row fails the whole page."""
    document = parse(
        _container(
            '<div class="tmi-group">'
            '<div class="tmi-group-name">Tue, 02 Jan</div>'
            '<div class="tmi-daily"><div class="tmi-name">Soup</div>'
            '<div class="tmi-price"><div class="row">$3</div></div></div>'
            '<div class="tmi-daily"><div class="tmi-name">Salad</div></div>'
            "</div>"
        )
    )

    with pytest.raises(NotFound) as exc_info:
        extract_structure(document)

    assert exc_info.value.what == "price"
    assert exc_info.value.pattern == ITEM_PRICE


def test_missing_item_name() -> None:
    document = parse(
        _container(
            '<div class="tmi-group"><div class="tmi-group-name">Mon</div>'
            '<div class="tmi-daily"><div class="tmi-price"><div class="row">$3</div></div></div>'
            "</div>"
        )
    )

    with pytest.raises(NotFound) as exc_info:
        extract_structure(document)

    assert exc_info.value.what == "name"


@pytest.mark.parametrize(
    ("group_name", "what"),
    [
        ("", "group name"),
        ('<div class="tmi-group-name"></div>', "group name text"),
    ],
)
def test_bad_group_name(group_name: str, what: str) -> None:
    """Test that a missing or empty group name is reported precisely."""
    document = parse(_container(f'<div class="tmi-group">{group_name}</div>'))

    with pytest.raises(NotFound) as exc_info:
        extract_structure(document)

    assert exc_info.value.what == what


def test_missing_container() -> None:
    """Test that a page with neither representation is not an empty menu."""
    with pytest.raises(NotFound) as exc_info:
        extract_daily_menu(b"<html><body><p>Closed today</p></body></html>")

    assert exc_info.value.what == "daily menu container"


def test_empty_container() -> None:
    assert extract_daily_menu(_container("")) == []


def test_empty_item_name() -> None:
    """Test that an item name element without text is reported as such."""
    document = parse(
        _container(
            '<div class="tmi-group"><div class="tmi-group-name">Mon</div>'
            '<div class="tmi-daily"><div class="tmi-name"></div>'
            '<div class="tmi-price"><div class="row">$3</div></div></div>'
            "</div>"
        )
    )

    with pytest.raises(NotFound) as exc_info:
        extract_structure(document)

    assert exc_info.value.what == "name text"

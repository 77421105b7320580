"""Pytest configuration and fixtures."""

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.menu import get_loader
from app.main import app
from dailymenu.errors import DailyMenuError

# A day as (date label, [(dish name, display price), ...])
Day = tuple[str, list[tuple[str, str]]]

SAMPLE_DAYS: list[Day] = [
    ("Mon, 01 Jan", [("Soup", "$5"), ("Fried cheese", "$9")]),
    ("Tue, 02 Jan", [("Salad", ""), ("Goulash", "$8")]),
    ("Wed, 03 Jan", []),
]


def build_state(days: list[Day], restaurant_ids: tuple[str, ...] = ("16506890",)) -> dict[str, Any]:
    """Preloaded state shaped like the site's, with some unrelated keys."""
    daily_menu = [
        {
            "timeHeading": date,
            "dishes": [
                {"name": name, "displayPrice": price, "dishId": i}
                for i, (name, price) in enumerate(dishes)
            ],
        }
        for date, dishes in days
    ]
    return {
        "apiState": {"loading": False},
        "pages": {
            "current": {"pageType": "restaurant"},
            "restaurant": {
                rid: {"resId": rid, "sections": {"SECTION_DAILY_MENU": daily_menu}}
                for rid in restaurant_ids
            },
        },
    }


def render_state_script(state: dict[str, Any]) -> str:
    escaped = json.dumps(state).replace('"', '\\"')
    return f"""<script>
window.__PRELOADED_STATE__ = JSON.parse("{escaped}")
window.__APP_VERSION__ = "1.0";
</script>"""


def render_state_page(state: dict[str, Any]) -> bytes:
    script = render_state_script(state)
    return f"""<!DOCTYPE html>
<html>
<head>
<title>Daily menu</title>
<script>window.dataLayer = window.dataLayer || [];</script>
{script}
</head>
<body><div id="root"></div></body>
</html>
""".encode()


def render_structural_page(days: list[Day] = SAMPLE_DAYS) -> bytes:
    groups = []
    for date, dishes in days:
        items = "".join(
            f"""
      <div class="tmi-daily">
        <div class="tmi-name">
          {name}
        </div>
        <div class="tmi-price"><div class="row">{price}</div></div>
      </div>"""
            for name, price in dishes
        )
        groups.append(
            f"""
    <div class="tmi-group">
      <div class="tmi-group-name"> {date} </div>{items}
    </div>"""
        )
    body = "".join(groups)
    return f"""<!DOCTYPE html>
<html>
<head><title>Daily menu</title><script>var ga = 1;</script></head>
<body>
  <div id="daily-menu-container">{body}
  </div>
</body>
</html>
""".encode()


@pytest.fixture
def state_page() -> Callable[..., bytes]:
    """Build a page carrying the menu as preloaded state."""

    def _build(days: list[Day] = SAMPLE_DAYS, **kwargs: Any) -> bytes:
        return render_state_page(build_state(days, **kwargs))

    return _build


@pytest.fixture
def structural_page() -> Callable[..., bytes]:
    """Build a page carrying the menu in its markup only."""
    return render_structural_page


@pytest.fixture
def combined_page() -> Callable[..., bytes]:
    """Build a page whose state and markup describe different days."""

    def _build(state_days: list[Day], markup_days: list[Day], **kwargs: Any) -> bytes:
        script = render_state_script(build_state(state_days, **kwargs)).encode()
        return render_structural_page(markup_days).replace(b"</head>", script + b"</head>", 1)

    return _build


class FakeLoader:
    """Stands in for ``PageLoader``; returns canned content or raises."""

    site_url = "https://www.zomato.com"

    def __init__(self, content: bytes = b"", error: DailyMenuError | None = None) -> None:
        self.content = content
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def page_url(self, city: str, restaurant: str) -> str:
        return f"{self.site_url}/{city}/{restaurant}/daily-menu"

    async def fetch(self, city: str, restaurant: str) -> bytes:
        self.calls.append((city, restaurant))
        if self.error is not None:
            raise self.error
        return self.content


@pytest.fixture
def fake_loader() -> FakeLoader:
    return FakeLoader()


@pytest.fixture
async def client(fake_loader: FakeLoader) -> AsyncGenerator[AsyncClient, None]:
    """Provide test client with the page loader overridden."""
    app.dependency_overrides[get_loader] = lambda: fake_loader

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()

"""Fetching of daily-menu pages over HTTP."""

from __future__ import annotations

import logging

import httpx

from dailymenu.config import Settings, settings
from dailymenu.errors import TransportError

logger = logging.getLogger(__name__)


def browser_headers(user_agent: str) -> dict[str, str]:
    """Headers copied from a desktop Firefox request."""
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        # Compressed responses are not served reliably.
        "Accept-Encoding": "identity",
        # Must be lower case.
        "Connection": "keep-alive",
        "DNT": "1",
        "Upgrade-Insecure-Requests": "1",
        "Cache-Control": "max-age=0",
        "Accept-Language": "en-US,en;q=0.5",
    }


def create_client(config: Settings = settings) -> httpx.AsyncClient:
    """Build an ``AsyncClient`` configured for page fetches."""
    return httpx.AsyncClient(
        timeout=config.request_timeout,
        follow_redirects=True,
        headers=browser_headers(config.user_agent),
    )


class PageLoader:
    """Loads the raw daily-menu page of a restaurant.

    The restaurant identifier is the path segment of the restaurant's URL
    on the site, e.g. ``"lokal-dlouha"`` for ``/praha/lokal-dlouha``.
    """

    def __init__(self, client: httpx.AsyncClient, site_url: str = settings.site_url) -> None:
        self.client = client
        self.site_url = site_url.rstrip("/")

    def page_url(self, city: str, restaurant: str) -> str:
        return f"{self.site_url}/{city}/{restaurant}/daily-menu"

    async def fetch(self, city: str, restaurant: str) -> bytes:
        """GET the daily-menu page and return its body.

        Raises:
            TransportError: on network failure or a non-2xx response.
        """
        url = self.page_url(city, restaurant)
        logger.debug("Fetching %s", url)
        try:
            resp = await self.client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Failed to fetch %s: %s", url, exc)
            raise TransportError(f"failed to fetch {url}: {exc}") from exc
        return resp.content

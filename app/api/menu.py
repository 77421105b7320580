"""Daily-menu API endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.schemas.menu import DailyMenuResponse, ErrorDetail, MenuResponse
from dailymenu.config import Strategy
from dailymenu.errors import DailyMenuError, TransportError
from dailymenu.loader import PageLoader
from dailymenu.menu import get_daily_menu

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["menu"])


def get_loader(request: Request) -> PageLoader:
    """Page loader shared for the lifetime of the application."""
    return request.app.state.loader


@router.get(
    "/daily-menu/{city}/{restaurant}",
    response_model=DailyMenuResponse,
    responses={422: {"model": ErrorDetail}, 502: {"model": ErrorDetail}},
)
async def daily_menu(
    city: str,
    restaurant: str,
    strategy: Strategy | None = None,
    loader: PageLoader = Depends(get_loader),
) -> DailyMenuResponse:
    """
    Return the daily menu of a restaurant.

    Args:
        city: City segment of the restaurant URL
        restaurant: Restaurant segment of the URL
        strategy: Optional override of the extraction strategy
        loader: Page loader (injected dependency)

    Raises:
        HTTPException: 502 when the page cannot be fetched, 422 when the
            menu cannot be extracted from it
    """
    try:
        menus = await get_daily_menu(city, restaurant, loader=loader, strategy=strategy)
    except TransportError as e:
        logger.warning(f"Fetch failed for {city}/{restaurant}: {e}")
        raise HTTPException(
            status_code=502,
            detail=ErrorDetail(kind=e.kind, message=str(e)).model_dump(),
        )
    except DailyMenuError as e:
        logger.warning(f"Extraction failed for {city}/{restaurant}: {e}")
        raise HTTPException(
            status_code=422,
            detail=ErrorDetail(kind=e.kind, message=str(e)).model_dump(),
        )

    return DailyMenuResponse(
        city=city,
        restaurant=restaurant,
        url=loader.page_url(city, restaurant),
        menus=[MenuResponse.model_validate(menu) for menu in menus],
    )

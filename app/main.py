"""FastAPI application factory and configuration."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from app.api.menu import router as menu_router
from app.config import settings
from dailymenu.loader import PageLoader, create_client

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Opens one HTTP client for all page fetches and closes it on shutdown.
    """
    logger.info("Starting application...")
    async with create_client(settings) as client:
        app.state.loader = PageLoader(client, settings.site_url)
        yield
    logger.info("Shutting down application...")


# Create FastAPI app
app = FastAPI(
    title="Daily Menu",
    description="Daily menus of restaurants listed on zomato.com",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
if settings.cors_origins:
    from fastapi.middleware.cors import CORSMiddleware

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(menu_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        Status information
    """
    return {"status": "healthy", "environment": settings.app_env}

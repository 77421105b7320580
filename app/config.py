from pydantic import Field

from dailymenu.config import Settings as ScraperSettings


class Settings(ScraperSettings):
    """API configuration using pydantic-settings.

    Inherits the scraper settings (``DAILYMENU_*`` variables).
    """

    app_env: str = Field(
        default="development", description="Environment (development, production)"
    )
    allowed_origins: str = Field(
        default="http://localhost:8000,http://127.0.0.1:8000",
        description="Comma-separated CORS allowed origins",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Parse allowed origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()

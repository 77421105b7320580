import enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Strategy(str, enum.Enum):
    """Which representation of the menu to read."""

    AUTO = "auto"  # preloaded state, falling back to markup
    STATE = "state"
    STRUCTURAL = "structural"


# The site misbehaves with unusual header sets, so we send what Firefox sends.
FIREFOX_USER_AGENT = (
    "Mozilla/5.0 (X11; Fedora; Linux x86_64; rv:60.0) Gecko/20100101 Firefox/60.0"
)


class Settings(BaseSettings):
    """Scraper configuration using pydantic-settings."""

    model_config = SettingsConfigDict(
        env_prefix="DAILYMENU_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    site_url: str = Field(
        default="https://www.zomato.com",
        description="Base URL of the restaurant listing site",
    )
    request_timeout: float = Field(
        default=15.0, gt=0, description="HTTP timeout in seconds"
    )
    user_agent: str = Field(
        default=FIREFOX_USER_AGENT, description="User-Agent header for page fetches"
    )
    strategy: Strategy = Field(
        default=Strategy.AUTO, description="Extraction strategy (auto, state, structural)"
    )
    debug: bool = Field(default=False, description="Debug logging")


# Global settings instance
settings = Settings()

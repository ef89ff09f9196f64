"""Application settings with environment variable support."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scraper settings loaded from READIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="READIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    debug_mode: bool = Field(default=False, description="Enable debug logging")

    # Search Settings
    reddit_base_url: str = Field(
        default="https://old.reddit.com", description="Server-rendered Reddit front end"
    )
    search_path: str = Field(default="/search", description="Search results path")
    search_timeout: Optional[float] = Field(
        default=None, description="Search request timeout in seconds (None uses the client default)"
    )
    search_user_agent: Optional[str] = Field(default=None, description="User agent for search requests")

    # Permalink Settings
    permalink_timeout: float = Field(default=30, description="Permalink request timeout in seconds")
    permalink_user_agent: str = Field(default="readit-core/1.0", description="User agent for permalink requests")
    lookup_cache_max_entries: Optional[int] = Field(
        default=None, ge=1, description="Bound for the permalink lookup cache (None keeps every entry)"
    )

    @property
    def search_url(self) -> str:
        """Construct the search endpoint URL."""
        return f"{self.reddit_base_url.rstrip('/')}/{self.search_path.lstrip('/')}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Application settings loaded from environment variables.

Uses pydantic-settings for automatic loading from .env file.
All settings except the bot token have sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Demo bot configuration.

    All values are loaded from environment variables.

    Attributes:
        telegram_bot_token: Bot token from @BotFather (required)
        environment: Runtime environment (development/production)
        log_level: Logging verbosity
        log_updates: Install LoggingMiddleware on the router
        reply_with_results: Send string dispatch results back to the chat
    """

    # Required
    telegram_bot_token: str

    # Environment
    environment: Literal["development", "production"] = "development"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_updates: bool = True

    # Routing
    reply_with_results: bool = True

    # Pydantic settings config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Case-insensitive env var names
        case_sensitive=False,
        # Empty env vars fall back to defaults
        env_ignore_empty=True,
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and reused throughout the application.

    Returns:
        Settings instance with all configuration values.
    """
    return Settings()

"""
Application configuration.

Loads settings from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit applied to the beacon query routes.
        api_prefix: Path prefix for every router.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Beacon Query API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    api_prefix: str = "/api/v1"


settings = Settings()

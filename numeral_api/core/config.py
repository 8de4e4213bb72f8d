"""
Application configuration.

Loads settings from environment variables and .env file.
Every tunable value lives here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (serves /docs and /redoc). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the development server binds to.
        port: Port the development server listens on.
        rate_limit_default: Per-client rate limit for the conversion endpoints.
        cors_allow_origins: Origins allowed by the CORS middleware.
        cors_allow_methods: HTTP methods allowed by the CORS middleware.
        cors_allow_headers: Request headers allowed by the CORS middleware.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Roman ↔ Arabic Numeral Conversion API"
    version: str = "2.0.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000
    rate_limit_default: str = "120/minute"

    cors_allow_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]


settings = Settings()

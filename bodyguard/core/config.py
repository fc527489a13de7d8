"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Default rate limit for all endpoints.
        max_request_size_bytes: Maximum allowed request body size.
        max_cause_depth: Maximum exception chain depth searched for
            a located JSON error.
        storage_dir: Directory holding downloadable documents.
        download_name: File name suggested for downloaded documents.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="BODYGUARD_"
    )

    project_name: str = "Bodyguard"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"
    max_request_size_bytes: int = 1_048_576  # 1 MB
    max_cause_depth: int = 64
    storage_dir: Path = Path("public/data")
    download_name: str = "document.pdf"


settings = Settings()

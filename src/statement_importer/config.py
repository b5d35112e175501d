"""Application configuration using Pydantic settings."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Importer settings loaded from environment variables and .env.

    Command-line flags override these values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Directories
    input_dir: str = "~/Desktop"
    output_dir: str | None = None  # default: <input_dir>/<YYYYMMDD>_output

    # Watch mode
    watch: bool = False
    watch_interval_seconds: float = 5.0

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    # PDF extraction
    pdf_extraction_strategy: str = "pdftotext"
    pdftotext_timeout_seconds: float = 30.0


def expand_home_dir(path: str) -> str:
    """Expand a leading ~ to the user's home directory."""
    if path == "~" or path.startswith("~/"):
        return str(Path(path).expanduser())
    return path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

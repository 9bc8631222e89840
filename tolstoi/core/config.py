"""
tolstoi - Application Configuration

Patterns Applied:
- Pydantic Settings with SettingsConfigDict
- Environment variable prefix TOLSTOI_

File paths are not settings: they come from the command line (see tolstoi.cli).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables with TOLSTOI_ prefix.
    Example: TOLSTOI_LOG_LEVEL=DEBUG, TOLSTOI_TIE_TOLERANCE=0.0001
    """

    # Application metadata
    service_name: str = "tolstoi"

    # Logging configuration
    log_level: str = "INFO"
    log_json: bool = False

    # Chapterizer markers (Project Gutenberg War and Peace edition)
    chapter_marker: str = "CHAPTER "
    book_end_marker: str = "END OF THE PROJECT GUTENBERG EBOOK, WAR AND PEACE"

    # Classifier: 0.0 means exact float equality for "Equal density!"
    tie_tolerance: float = Field(default=0.0, ge=0.0)

    # Tracing configuration
    tracing_enabled: bool = False
    tracing_console_export: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TOLSTOI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()

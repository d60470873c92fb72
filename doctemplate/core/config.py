"""Application configuration using Pydantic v2 Settings.

Centralized configuration that loads from environment variables
and provides type-safe access throughout the engine.
"""

import logging
from pathlib import Path

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables.

    All settings have sensible defaults and can be overridden via
    environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Rendering
    separator_width: int = Field(
        default=80,
        ge=1,
        description="Number of characters in a separator divider.",
    )
    signature_blank: str = Field(
        default="_" * 24,
        description="Fill-in marker for unset signature fields.",
    )
    table_data_fallback: bool = Field(
        default=True,
        description="Read table rows from the shared 'tableData' key when the section id key is absent.",
    )
    apply_defaults: bool = Field(
        default=True,
        description="Merge field default values into data before rendering.",
    )

    # Style tiers (points)
    header_font_size: float = Field(default=18, gt=0)
    heading_font_size: float = Field(default=13, gt=0)
    body_font_size: float = Field(default=11, gt=0)
    footer_font_size: float = Field(default=9, gt=0)

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR.",
    )
    log_dir: Path | None = Field(
        default=None,
        description="Directory for info.log and error.log. Console only when unset.",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Normalize log level to uppercase."""
        return v.upper()

    @field_validator("footer_font_size")
    @classmethod
    def footer_below_body(cls, v: float, info: ValidationInfo) -> float:
        """Keep the footer one size tier below body text."""
        body = info.data.get("body_font_size")
        if body is not None and v >= body:
            raise ValueError("footer_font_size must be smaller than body_font_size")
        return v

    def configure_logging(self) -> None:
        """Configure global logging based on settings."""
        import structlog

        level = getattr(logging, self.log_level, logging.INFO)

        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(),
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=level,
        )

        logging.getLogger("doctemplate").setLevel(level)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global Settings instance.

    Returns:
        The singleton Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        _settings.configure_logging()
    return _settings


def reset_settings() -> None:
    """Drop the cached Settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None

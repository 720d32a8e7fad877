"""Configuration settings for union-fonts."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BackendChoice(str, Enum):
    """Native toolkit used to construct fonts."""

    AUTO = "auto"
    APPKIT = "appkit"
    QT = "qt"
    NONE = "none"


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file logging when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )

    @field_validator("log_level", "file_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}' (expected one of {', '.join(_LOG_LEVELS)})")
        return level


class UnionFontsSettings(BaseModel):
    """Main application settings."""

    backend: BackendChoice = Field(
        default=BackendChoice.AUTO,
        description="Native font backend (auto picks AppKit, then Qt, then none)",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> UnionFontsSettings:
    """Get default application settings."""
    return UnionFontsSettings()

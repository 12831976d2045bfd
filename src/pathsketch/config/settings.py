"""Configuration settings for Pathsketch."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class AttachDirection(str, Enum):
    """End of a path that free-standing vertices attach to."""

    FORWARD = "forward"
    BACKWARD = "backward"


class GeometryConfig(BaseModel):
    """Configuration for numeric geometry operations."""

    projection_samples: int = Field(
        default=100,
        ge=8,
        le=10_000,
        description="Lookup samples taken along a curve before refining a projection",
    )
    projection_tolerance: float = Field(
        default=1e-9,
        gt=0.0,
        le=1e-2,
        description="Parameter interval at which curve projection refinement stops",
    )
    precision: int = Field(
        default=6,
        ge=0,
        le=15,
        description="Decimal places used when printing path command coordinates",
    )


class EditorConfig(BaseModel):
    """Configuration for path editing sessions."""

    initial_direction: AttachDirection = Field(
        default=AttachDirection.FORWARD,
        description="End that new vertices attach to before anything is hit",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PathsketchSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PathsketchSettings:
    """Get default application settings."""
    return PathsketchSettings()

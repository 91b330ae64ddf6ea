"""Logging configuration schema."""
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


class LogFileConfig(BaseModel):
    """Rotating log file configuration."""

    path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 0:
            raise ValueError("Log rotation settings must not be negative")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Root log level")
    destination: LogDestination = Field(LogDestination.STDOUT, description="Where log records go")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v

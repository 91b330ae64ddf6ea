"""Main application configuration schema."""
from typing import Any, Dict

from pydantic import BaseModel, Field

from .logging_schema import LoggingConfig
from .output_schema import DemoConfig, OutputConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    output: OutputConfig = Field(default_factory=lambda: OutputConfig())
    demos: DemoConfig = Field(default_factory=lambda: DemoConfig())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a plain dictionary."""
        return cls(**data)

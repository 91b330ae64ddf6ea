"""Configuration schemas package."""

from .app_schema import AppConfig
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel
from .output_schema import DemoConfig, OutputConfig, OutputFormat

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "LogFileConfig",
    "LogLevel",
    "LogDestination",
    "OutputConfig",
    "OutputFormat",
    "DemoConfig",
]

"""Configuration package with clean public API."""

from .schemas import (
    AppConfig,
    DemoConfig,
    LogDestination,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)
from .manager import ConfigurationManager, get_config_manager, reset_config_manager

__all__ = [
    # Main configuration
    "AppConfig",
    # Sections
    "LoggingConfig",
    "LogLevel",
    "LogDestination",
    "OutputConfig",
    "OutputFormat",
    "DemoConfig",
    # Configuration management
    "ConfigurationManager",
    "get_config_manager",
    "reset_config_manager",
]

"""Unified configuration management for the catalogue."""
from __future__ import annotations

import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.config.schemas import AppConfig, DemoConfig, LoggingConfig, OutputConfig
from pattern_catalog.config.utils import expand_config_env_vars
from pattern_catalog.domain.exceptions import ConfigurationError
from pattern_catalog.infrastructure.logging.logger import get_logger

T = TypeVar("T")

# Environment variable -> dotted configuration path
ENV_OVERRIDES: Dict[str, str] = {
    "PATTERN_CATALOG_LOG_LEVEL": "logging.level",
    "PATTERN_CATALOG_LOG_DESTINATION": "logging.destination",
    "PATTERN_CATALOG_OUTPUT_FORMAT": "output.format",
}

CONFIG_FILE_ENV = "PATTERN_CATALOG_CONFIG"


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is read from a JSON or YAML file when one is given (or named
    by ``PATTERN_CATALOG_CONFIG``), environment variables referenced in string
    values are expanded, ``PATTERN_CATALOG_*`` overrides are applied and the
    result is validated into an :class:`AppConfig`. Loading is lazy and
    thread-safe.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self.logger = get_logger(__name__)

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file in use, if any."""
        return self._config_file

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = expand_config_env_vars(config_data)
        config_data = self.apply_environment_overrides(config_data)

        try:
            app_config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        self.logger.debug(f"Configuration loaded from {self._config_file or 'defaults'}")
        return app_config

    def load_from_file(self, path: str) -> Dict[str, Any]:
        """
        Load raw configuration data from a JSON or YAML file.

        Args:
            path: Path to the configuration file

        Returns:
            Configuration dictionary

        Raises:
            ConfigurationError: If the file is missing or cannot be parsed
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.suffix.lower() in (".yml", ".yaml"):
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``PATTERN_CATALOG_*`` environment overrides."""
        result = dict(config_data)
        for env_var, dotted_path in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            section, key = dotted_path.split(".", 1)
            section_data = dict(result.get(section) or {})
            section_data[key] = value
            result[section] = section_data
            self.logger.debug(f"Applied environment override {env_var} -> {dotted_path}")
        return result

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            AppConfig: lambda: self.app_config,
            LoggingConfig: lambda: self.app_config.logging,
            OutputConfig: lambda: self.app_config.output,
            DemoConfig: lambda: self.app_config.demos,
        }
        if config_type not in type_mapping:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type]()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted key, e.g. ``output.format``."""
        value: Any = self.app_config.model_dump(mode="json")
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def reload(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None
_config_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """
    Get the global configuration manager instance.

    A different ``config_file`` than the one in use replaces the instance.
    """
    global _config_manager
    with _config_manager_lock:
        if _config_manager is None or (
            config_file is not None and config_file != _config_manager.config_file
        ):
            _config_manager = ConfigurationManager(config_file)
        return _config_manager


def reset_config_manager() -> None:
    """
    Reset the global configuration manager instance.

    This function is primarily for testing purposes.
    """
    global _config_manager
    with _config_manager_lock:
        _config_manager = None

"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR:default}
_DEFAULT_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*):([^}]*)\}")


def _expand_string(value: str) -> str:
    def _substitute(match: "re.Match[str]") -> str:
        name, default = match.group(1), match.group(2)
        return os.environ.get(name, default)

    value = _DEFAULT_PATTERN.sub(_substitute, value)
    return os.path.expandvars(value)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Strings support ``$VAR``, ``${VAR}`` and ``${VAR:default}``. Unknown
    variables without a default are left untouched. Dictionaries and lists are
    expanded recursively; other values are returned unchanged.

    Args:
        value: Value to expand

    Returns:
        Value with environment variables expanded
    """
    if isinstance(value, str):
        return _expand_string(value)
    if isinstance(value, dict):
        return {key: expand_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    if not isinstance(config, dict):
        return config
    return expand_env_vars(config)

"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from pattern_catalog.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        """Test expansion of simple environment variable."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("$TEST_VAR")
            assert result == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        """Test expansion of braced environment variable with subpath."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            result = expand_env_vars("${TEST_VAR}/subdir")
            assert result == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        """Test that unknown variables without a default are left untouched."""
        with patch.dict(os.environ, {}, clear=True):
            result = expand_env_vars("$NONEXISTENT_VAR")
            assert result == "$NONEXISTENT_VAR"

    def test_default_used_when_unset(self):
        """Test ${VAR:default} falls back to the default."""
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LOG_DIR:/var/log}/catalog.log") == "/var/log/catalog.log"

    def test_default_ignored_when_set(self):
        """Test ${VAR:default} prefers the environment value."""
        with patch.dict(os.environ, {"LOG_DIR": "/tmp/logs"}):
            assert expand_env_vars("${LOG_DIR:/var/log}") == "/tmp/logs"

    def test_expand_nested_dict_and_list_values(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "demos": {"options": {"observer": {"log_path": "$TEST_VAR/log.txt"}}},
                "paths": ["$TEST_VAR/a", "plain"],
            }
            result = expand_env_vars(config)
            assert result == {
                "demos": {"options": {"observer": {"log_path": "/test/path/log.txt"}}},
                "paths": ["/test/path/a", "plain"],
            }

    def test_expand_non_string_values(self):
        """Test that non-string values are returned unchanged."""
        config = {"number": 42, "boolean": True, "none": None}
        result = expand_env_vars(config)
        assert result == config

    def test_expand_config_env_vars(self):
        """Test the main configuration expansion function."""
        with patch.dict(os.environ, {"CATALOG_HOME": "/opt/catalog"}):
            config = {
                "logging": {"file": {"path": "$CATALOG_HOME/logs/catalog.log"}},
                "output": {"format": "table"},
            }
            result = expand_config_env_vars(config)
            assert result["logging"]["file"]["path"] == "/opt/catalog/logs/catalog.log"
            assert result["output"]["format"] == "table"

    def test_expand_config_env_vars_ignores_non_dict(self):
        """Test that non-dictionary configuration is passed through."""
        assert expand_config_env_vars(None) is None

"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from patternplayground.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


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
        """Test expansion of non-existent environment variable."""
        result = expand_env_vars("$NONEXISTENT_VAR")
        assert result == "$NONEXISTENT_VAR"

    def test_default_value_used_when_unset(self):
        """Test the ${VAR:default} form."""
        assert expand_env_vars("${PLAYGROUND_LOGDIR:logs}/app.log") == "logs/app.log"

    def test_default_value_ignored_when_set(self):
        with patch.dict(os.environ, {"PLAYGROUND_LOGDIR": "/var/log"}):
            assert expand_env_vars("${PLAYGROUND_LOGDIR:logs}/app.log") == "/var/log/app.log"

    def test_expand_nested_structures(self):
        """Test expansion inside nested dictionaries and lists."""
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            config = {
                "logging": {"file_path": "$TEST_VAR/log"},
                "paths": ["$TEST_VAR/a", "plain"],
                "width": 27,
            }
            result = expand_config_env_vars(config)
            assert result == {
                "logging": {"file_path": "/test/path/log"},
                "paths": ["/test/path/a", "plain"],
                "width": 27,
            }

    def test_non_string_values_unchanged(self):
        """Test that non-string values are returned unchanged."""
        assert expand_env_vars(42) == 42
        assert expand_env_vars(None) is None
        assert expand_env_vars(True) is True

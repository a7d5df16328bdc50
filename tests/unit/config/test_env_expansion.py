"""Tests for environment variable expansion utilities."""

import os
from unittest.mock import patch

from gof_patterns.config.utils.env_expansion import expand_config_env_vars, expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_simple_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("$TEST_VAR") == "/test/path"

    def test_expand_braced_env_var_with_subpath(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_expand_nonexistent_env_var(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("NONEXISTENT_VAR", None)
            assert expand_env_vars("$NONEXISTENT_VAR") == "$NONEXISTENT_VAR"

    def test_expand_nested_values(self):
        with patch.dict(os.environ, {"LOG_DIR": "/var/log"}):
            config = {
                "logging": {"file_path": "$LOG_DIR/patterns.log", "max_size_mb": 5},
                "demo": {"garnishes": ["lime", "$LOG_DIR"]},
            }
            result = expand_config_env_vars(config)

        assert result == {
            "logging": {"file_path": "/var/log/patterns.log", "max_size_mb": 5},
            "demo": {"garnishes": ["lime", "/var/log"]},
        }

    def test_non_string_values_unchanged(self):
        assert expand_env_vars(42) == 42
        assert expand_env_vars(None) is None
        assert expand_env_vars(True) is True

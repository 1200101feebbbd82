"""Tests for config module"""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from suggest_mcp.config import Config, get_config, setup_logging
from suggest_mcp.consts import MIN_SIMILARITY_SCORE, SERVER_NAME


class TestConfig:
    """Test Config class functionality"""

    def test_config_defaults_and_creation(self, clean_config):
        """Test config creation and default values"""
        assert clean_config.log_level == "INFO"
        assert clean_config.min_score == MIN_SIMILARITY_SCORE
        assert clean_config.include_signatures is True
        assert clean_config.project_root == "."

    def test_config_env_override(self, clean_env):
        """Test environment variable override"""
        os.environ["SUGGESTMCP_MIN_SCORE"] = "0.5"
        os.environ["SUGGESTMCP_INCLUDE_SIGNATURES"] = "false"

        try:
            config = Config()
            assert config.min_score == 0.5
            assert config.include_signatures is False
        finally:
            os.environ.pop("SUGGESTMCP_MIN_SCORE", None)
            os.environ.pop("SUGGESTMCP_INCLUDE_SIGNATURES", None)

    def test_config_custom_values(self):
        """Test creating config with custom values"""
        config = Config(log_level="DEBUG", min_score=0.6, project_root="/tmp")
        assert config.log_level == "DEBUG"
        assert config.min_score == 0.6
        assert config.project_root == "/tmp"

    @pytest.mark.parametrize("log_level", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_valid_log_levels(self, log_level):
        """Test that all valid log levels are accepted"""
        config = Config(log_level=log_level)
        assert config.log_level == log_level

    @pytest.mark.parametrize(
        "invalid_level", ["TRACE", "debug", "info", "FATAL", "NONE"]
    )
    def test_invalid_log_levels(self, invalid_level):
        """Test that invalid log levels are rejected"""
        with pytest.raises(ValidationError):
            Config(log_level=invalid_level)

    def test_min_score_validation(self):
        """Test min score bounds"""
        assert Config(min_score=0.0).min_score == 0.0
        assert Config(min_score=1.0).min_score == 1.0

        with pytest.raises(ValidationError):
            Config(min_score=-0.1)

        with pytest.raises(ValidationError):
            Config(min_score=1.5)

    def test_env_vars_isolated_from_defaults(self, clean_env):
        """Test that environment variables don't affect default testing"""
        # This test runs with clean_env, so should see defaults
        config = Config()
        assert config.log_level == "INFO"

        # Now set an env var within the test
        os.environ["SUGGESTMCP_LOG_LEVEL"] = "DEBUG"
        config_with_env = Config()
        assert config_with_env.log_level == "DEBUG"

        # The clean_env fixture will restore the original state
        os.environ.pop("SUGGESTMCP_LOG_LEVEL", None)

    def test_get_config_cached(self):
        """Test get_config returns a shared instance"""
        assert get_config() is get_config()


def test_setup_logging():
    """Test logging setup configures the root logger at the requested level"""
    with patch("suggest_mcp.config.logging.basicConfig") as basic_config:
        logger = setup_logging("WARNING")

    assert logger.name == SERVER_NAME
    assert basic_config.call_args.kwargs["level"] == logging.WARNING
    assert basic_config.call_args.kwargs["force"] is True

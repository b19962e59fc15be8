"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from alphaquest.config import LoggingConfig, LogLevel, get_default_settings


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self) -> None:
        """Test the default console and file levels."""
        config = get_default_settings().logging
        assert config.log_level == LogLevel.WARNING
        assert config.file_log_level == LogLevel.DEBUG
        assert config.log_file is None

    def test_level_from_string(self) -> None:
        """Test that level names are parsed into LogLevel."""
        config = LoggingConfig(log_level="INFO")
        assert config.log_level is LogLevel.INFO
        assert config.log_level.value == "INFO"

    @pytest.mark.parametrize("level", ["FOO", "verbose", ""])
    def test_unknown_level_rejected(self, level: str) -> None:
        """Test that names outside the logging levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingConfig(log_level=level)

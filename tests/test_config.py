"""
Configuration tests - environment-driven paths and sanity checks.
"""

from pathlib import Path
from unittest.mock import patch

import modtags.core.config as config


class TestConfig:
    """Test configuration accessors."""

    def test_api_dir_layout(self):
        assert config.get_api_dir() == Path(config.DIST_DIR) / "api" / "v1"

    def test_verification_toggle_reads_environment(self, monkeypatch):
        monkeypatch.setenv("MODRINTH_VERIFY_ENABLED", "false")
        assert config.is_verification_enabled() is False
        monkeypatch.setenv("MODRINTH_VERIFY_ENABLED", "TRUE")
        assert config.is_verification_enabled() is True

    def test_output_file(self, monkeypatch):
        monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
        assert config.get_output_file() is None
        monkeypatch.setenv("GITHUB_OUTPUT", "/tmp/out")
        assert config.get_output_file() == "/tmp/out"

    def test_default_config_has_no_issues(self):
        assert config.validate_config() == []

    @patch.object(config, "MODRINTH_VERIFY_TIMEOUT_SEC", 0)
    @patch.object(config, "MODRINTH_API_BASE", "ftp://example")
    def test_invalid_config_reported(self):
        issues = config.validate_config()
        assert "MODRINTH_VERIFY_TIMEOUT_SEC must be > 0" in issues
        assert "Invalid MODRINTH_API_BASE: ftp://example" in issues

    @patch.object(config, "DEBUG", True)
    def test_debug_flag(self):
        assert config.debug_enabled() is True

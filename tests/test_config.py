"""Tests for configuration loading."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from avrinfo.config import AnalyzerConfig
from avrinfo.utils.validation import ConfigurationError


class TestAnalyzerConfig:
    """Test cases for AnalyzerConfig."""

    def test_defaults(self):
        config = AnalyzerConfig.load(environ={})

        assert config.text_encoding == "latin-1"
        assert config.strict is False
        assert config.log_level == "WARNING"
        assert config.log_format == "text"

    def test_from_file(self, tmp_path):
        config_file = tmp_path / "avrinfo.yaml"
        config_file.write_text("avrinfo:\n  strict: true\n  log_level: debug\n")

        config = AnalyzerConfig.load(config_file, environ={})

        assert config.strict is True
        assert config.log_level == "DEBUG"

    def test_flat_file(self, tmp_path):
        config_file = tmp_path / "avrinfo.yaml"
        config_file.write_text("text_encoding: ascii\n")

        assert AnalyzerConfig.from_file(config_file).text_encoding == "ascii"

    def test_env_overrides_file(self, tmp_path):
        config_file = tmp_path / "avrinfo.yaml"
        config_file.write_text("strict: true\nlog_format: text\n")

        config = AnalyzerConfig.load(
            config_file, environ={"AVRINFO_STRICT": "no", "AVRINFO_LOG_FORMAT": "json"}
        )

        assert config.strict is False
        assert config.log_format == "json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            AnalyzerConfig.from_file(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "bad.yaml"
        config_file.write_text("strict: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Failed to parse"):
            AnalyzerConfig.from_file(config_file)

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="Unknown configuration keys"):
            AnalyzerConfig.from_dict({"colour": "red"})

    def test_unknown_encoding(self):
        with pytest.raises(ConfigurationError, match="Unknown text encoding"):
            AnalyzerConfig(text_encoding="no-such-codec")

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError, match="log_level"):
            AnalyzerConfig(log_level="LOUD")

    def test_invalid_strict_env(self):
        with pytest.raises(ConfigurationError, match="AVRINFO_STRICT"):
            AnalyzerConfig.load(environ={"AVRINFO_STRICT": "maybe"})

    def test_scalar_document(self, tmp_path):
        config_file = tmp_path / "scalar.yaml"
        config_file.write_text("5\n")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            AnalyzerConfig.from_file(config_file)

    def test_scalar_section(self):
        with pytest.raises(ConfigurationError, match="avrinfo section"):
            AnalyzerConfig.from_dict({"avrinfo": "strict"})

    def test_non_string_encoding(self):
        with pytest.raises(ConfigurationError, match="Unknown text encoding"):
            AnalyzerConfig.from_dict({"text_encoding": 5})

"""
Configuration for avrinfo.

Settings come from defaults, then an optional YAML file, then
AVRINFO_* environment variables.

Example config file:
    avrinfo:
      text_encoding: latin-1
      strict: false
      log_level: INFO
      log_format: text
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from avrinfo.utils.validation import ConfigurationError

ENV_PREFIX = "AVRINFO_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass
class AnalyzerConfig:
    """
    Analyzer and CLI settings.

    Attributes:
        text_encoding: Encoding of the name and comment fields
        strict: Treat validation warnings as errors
        log_level: Root log level
        log_format: "text" (Rich console) or "json"
    """

    text_encoding: str = "latin-1"
    strict: bool = False
    log_level: str = "WARNING"
    log_format: str = "text"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """
        Check that every setting has a usable value.

        Raises:
            ConfigurationError: If a value is invalid
        """
        try:
            "".encode(self.text_encoding)
        except (LookupError, TypeError):
            raise ConfigurationError(f"Unknown text encoding: {self.text_encoding}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level}"
            )

        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"log_format must be one of {list(LOG_FORMATS)}, got {self.log_format}"
            )

        if not isinstance(self.strict, bool):
            raise ConfigurationError(f"strict must be true or false, got {self.strict!r}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AnalyzerConfig":
        """
        Create a config from a mapping, rejecting unknown keys.

        A top-level "avrinfo" section is unwrapped if present.
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Configuration must be a mapping")

        if "avrinfo" in data:
            data = data["avrinfo"] or {}
            if not isinstance(data, Mapping):
                raise ConfigurationError("The avrinfo section must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

        return cls(**data)

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "AnalyzerConfig":
        """
        Load configuration from a YAML file.

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise ConfigurationError(f"Configuration file not found: {file_path}")

        try:
            with open(file_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML configuration: {e}")

        return cls.from_dict(data)

    @classmethod
    def load(
        cls, file_path: Optional[Union[str, Path]] = None, environ: Optional[Mapping[str, str]] = None
    ) -> "AnalyzerConfig":
        """
        Load defaults, an optional YAML file and environment overrides.

        Args:
            file_path: Optional YAML config file
            environ: Environment mapping (defaults to os.environ)

        Returns:
            Validated AnalyzerConfig
        """
        config = cls.from_file(file_path) if file_path else cls()
        overrides = _env_overrides(os.environ if environ is None else environ)

        if not overrides:
            return config

        values = {f.name: getattr(config, f.name) for f in fields(cls)}
        values.update(overrides)
        return cls(**values)


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    """Collect AVRINFO_* settings from the environment."""
    overrides: Dict[str, Any] = {}

    for f in fields(AnalyzerConfig):
        raw = environ.get(ENV_PREFIX + f.name.upper())
        if raw is None:
            continue

        if f.name == "strict":
            lowered = raw.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                overrides[f.name] = True
            elif lowered in ("0", "false", "no", "off", ""):
                overrides[f.name] = False
            else:
                raise ConfigurationError(f"{ENV_PREFIX}STRICT must be a boolean, got {raw!r}")
        else:
            overrides[f.name] = raw.strip()

    return overrides

"""User configuration for dirscout."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Self

from platformdirs import user_config_path

from dirscout.exceptions import ConfigValidationError
from dirscout.exceptions import ConfigVersionError

CONFIG_VERSION = 1

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Defaults applied by the command-line interface."""

    version: int = CONFIG_VERSION
    long_listing: bool = False  # Default detail mode for `ls`
    show_skipped: bool = False  # Default for `find --show-skipped`
    log_level: str = "WARNING"  # Used unless --verbose is given

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location using platformdirs."""
        return user_config_path("dirscout") / "config.json"

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "version": self.version,
            "long_listing": self.long_listing,
            "show_skipped": self.show_skipped,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Config must be a JSON object")
        if "version" not in data:
            raise ConfigValidationError("Config missing 'version' key")

        version = data["version"]
        if not isinstance(version, int):
            raise ConfigValidationError(f"Config version must be an integer: {version!r}")
        if version > CONFIG_VERSION:
            raise ConfigVersionError(
                f"Config version {version} is newer than supported version {CONFIG_VERSION}"
            )

        config = cls(version=version)
        for key in ("long_listing", "show_skipped"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigValidationError(f"Config '{key}' must be true or false")
                setattr(config, key, data[key])

        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if level not in _LOG_LEVELS:
                raise ConfigValidationError(
                    f"Unknown log level {data['log_level']!r} "
                    f"(expected one of {', '.join(_LOG_LEVELS)})"
                )
            config.log_level = level

        return config

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load config from JSON file. Returns defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            return cls()

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON in config: {e}")
        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """Save config to JSON file atomically.

        Args:
            path: Path to save config. If None, uses default location.
        """
        if path is None:
            path = self.default_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        temp_path = path.with_suffix(".tmp")
        temp_path.write_text(json.dumps(self.to_dict(), indent=2))
        temp_path.replace(path)

# MIT License
# Copyright (c) 2025 Matt / Grain Ecosystem

"""
Configuration for jotter.

Read from ~/.jotter/config.json when present, e.g.:

    {"logging": {"debug": true, "log_retention_count": 7}}

Only ambient behaviour (logging) is configurable. What file an entry ends
up in is decided by the command line and the directory contents alone.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError


class LoggingConfig(BaseModel):
    """Logging settings."""

    debug: bool = False
    log_retention_count: int = Field(default=7, ge=1)


class JotterConfig(BaseModel):
    """Top-level jotter configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @staticmethod
    def get_config_path() -> Path:
        """Get the config file path (~/.jotter/config.json)."""
        return Path.home() / ".jotter" / "config.json"

    @classmethod
    def load(cls) -> "JotterConfig":
        """Load config from disk, falling back to defaults on any problem."""
        config_path = cls.get_config_path()
        if not config_path.exists():
            return cls()

        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        except (OSError, json.JSONDecodeError, ValidationError):
            return cls()


_config: Optional[JotterConfig] = None


def get_config() -> JotterConfig:
    """Get the cached configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = JotterConfig.load()
    return _config


def reload_config() -> JotterConfig:
    """Drop the cached configuration and load it again."""
    global _config
    _config = None
    return get_config()

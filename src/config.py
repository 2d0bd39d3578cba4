"""
Configuration loader for the MCP gateway.

Starts from built-in defaults, merges an optional YAML config and then
applies overrides from environment variables (``.env`` is honoured).
"""

from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

load_dotenv()

DEFAULT_CONFIG: dict[str, Any] = {
    "server": {
        "host": "0.0.0.0",
        "port": 8000,
    },
    "sse": {
        "keepalive_interval": 30.0,
    },
    "logging": {
        "level": "INFO",
    },
}

# env var -> (section, key, type)
_ENV_OVERRIDES = {
    "POLYMARKET_MCP_HOST": ("server", "host", str),
    "POLYMARKET_MCP_PORT": ("server", "port", int),
    "POLYMARKET_MCP_KEEPALIVE": ("sse", "keepalive_interval", float),
    "POLYMARKET_MCP_LOG_LEVEL": ("logging", "level", str),
}


def load_config(config_path: str | None = "config.yaml") -> dict:
    """
    Load configuration.

    A missing file is fine (defaults apply); a file whose top level is
    not a mapping raises ``ValueError``.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path and Path(config_path).exists():
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file {config_path} must contain a mapping")
        _merge(config, loaded)

    for env_name, (section, key, cast) in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config.setdefault(section, {})[key] = cast(value)

    return config


def _merge(base: dict, override: dict) -> None:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value

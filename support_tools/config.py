"""
YAML configuration loader.

Reads config.yaml and produces a typed SupportSettings object.
Falls back to sensible defaults if the config file is missing.
"""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from support_tools.models import SupportSettings

# Default path: config.yaml next to the project root
_DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config.yaml"

# Environment variable that overrides the default path
CONFIG_ENV_VAR = "SUPPORT_CLI_CONFIG"


def _resolve_path(path: str | Path | None) -> Path:
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return _DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> SupportSettings:
    """
    Load and parse the YAML configuration file.

    Raises:
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the document is not a mapping or timeout_ms is not an integer.
    """
    config_path = _resolve_path(path)

    if not config_path.exists():
        print(f"⚠  Config file not found at {config_path}, using defaults.")
        return SupportSettings()

    with open(config_path, "r") as fh:
        raw = yaml.safe_load(fh) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    raw_settings = raw.get("settings") or {}
    raw_health = raw.get("health") or {}

    # `timeout_ms:` with no value loads as None
    timeout_ms = raw_health.get("timeout_ms")
    if timeout_ms is None:
        timeout_ms = 5000
    try:
        timeout_ms = int(timeout_ms)
    except (TypeError, ValueError):
        raise ValueError(f"health.timeout_ms must be an integer, got {timeout_ms!r}") from None

    return SupportSettings(
        log_level=str(raw_settings.get("log_level", "INFO")).upper(),
        health_timeout_ms=timeout_ms,
        endpoints=[str(url) for url in raw_health.get("endpoints") or []],
    )

"""Settings loading and normalization from ``cairn.yaml``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from cairn.config.model import CairnSettings
from cairn.constants.config import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_SUFFIX,
    DEFAULT_FEATURE_SUFFIX,
    DEFAULT_LIBRARY_DIR,
    DEFAULT_LOG_LEVEL,
    SETTINGS_FILENAME,
    VALID_LOG_LEVELS,
)
from cairn.constants.validation import ALLOWED_SETTINGS_KEYS
from cairn.exceptions import ConfigError


def load_settings(root: Path, settings_path: Path | None = None) -> CairnSettings:
    """Load host settings from ``cairn.yaml`` under ``root`` or an explicit path.

    A missing default file yields defaults; a missing explicit file is an error.
    Relative directories resolve against ``root``.
    """
    root = root.resolve()
    path = settings_path.resolve() if settings_path else (root / SETTINGS_FILENAME)
    if not path.exists():
        if settings_path is not None:
            raise ConfigError(f"Settings file not found: {path}")
        return CairnSettings.for_root(root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML settings file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_SETTINGS_KEYS)
    if unknown:
        raise ConfigError(f"Unknown settings keys in {path}: {', '.join(unknown)}")

    log_level = raw.get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(log_level, str) or log_level.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {log_level!r}")

    return CairnSettings(
        library_dir=_resolve_dir(root, raw.get("library_dir", DEFAULT_LIBRARY_DIR), "library_dir"),
        config_dir=_resolve_dir(root, raw.get("config_dir", DEFAULT_CONFIG_DIR), "config_dir"),
        feature_suffix=_ensure_suffix(raw.get("feature_suffix", DEFAULT_FEATURE_SUFFIX), "feature_suffix"),
        config_suffix=_ensure_suffix(raw.get("config_suffix", DEFAULT_CONFIG_SUFFIX), "config_suffix"),
        log_level=log_level.upper(),
    )


def _resolve_dir(root: Path, value: Any, key_name: str) -> Path:
    """Resolve a directory setting against ``root``."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    path = Path(value.strip()).expanduser()
    return path if path.is_absolute() else (root / path)


def _ensure_suffix(value: Any, key_name: str) -> str:
    """Validate a filename suffix setting."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    if "/" in value:
        raise ConfigError(f"{key_name} must not contain a path separator")
    return value.strip()

"""Stable validation error codes and allowed keys for settings validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # settings file not found (explicit --settings)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid enum value
CFG007: str = "CFG007"  # root directory not found

ALLOWED_SETTINGS_KEYS: frozenset[str] = frozenset(
    {
        "library_dir",
        "config_dir",
        "feature_suffix",
        "config_suffix",
        "log_level",
    }
)

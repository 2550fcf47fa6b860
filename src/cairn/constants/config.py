"""Host settings defaults and filenames."""

from __future__ import annotations

SETTINGS_FILENAME: str = "cairn.yaml"

DEFAULT_LIBRARY_DIR: str = "lib"
DEFAULT_CONFIG_DIR: str = "conf"
DEFAULT_FEATURE_SUFFIX: str = ".feature.py"
DEFAULT_CONFIG_SUFFIX: str = ".conf.py"
DEFAULT_LOG_LEVEL: str = "INFO"

VALID_LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})

PATH_SETTING_KEYS: tuple[str, ...] = ("library_dir", "config_dir")
SUFFIX_SETTING_KEYS: tuple[str, ...] = ("feature_suffix", "config_suffix")

"""Host settings model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cairn.constants.config import (
    DEFAULT_CONFIG_DIR,
    DEFAULT_CONFIG_SUFFIX,
    DEFAULT_FEATURE_SUFFIX,
    DEFAULT_LIBRARY_DIR,
    DEFAULT_LOG_LEVEL,
)


@dataclass(frozen=True)
class CairnSettings:
    """Resolved host settings. Directories are absolute once loaded from a root."""

    library_dir: Path = Path(DEFAULT_LIBRARY_DIR)
    config_dir: Path = Path(DEFAULT_CONFIG_DIR)
    feature_suffix: str = DEFAULT_FEATURE_SUFFIX
    config_suffix: str = DEFAULT_CONFIG_SUFFIX
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def for_root(cls, root: Path) -> CairnSettings:
        """Default settings with directories anchored at ``root``."""
        root = root.resolve()
        return cls(library_dir=root / DEFAULT_LIBRARY_DIR, config_dir=root / DEFAULT_CONFIG_DIR)

"""Constants for stdout formatting and machine-readable output."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"

VALID_LIST_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_LIST_FORMAT: str = "text"

FEATURES_SCHEMA_FILENAME: str = "features.schema.json"

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"

STATE_COLORS: dict[str, str] = {
    "entry": ANSI_GREEN,
    "entry+store": ANSI_GREEN,
    "store": ANSI_CYAN,
    "noop": ANSI_YELLOW,
    "unloaded": ANSI_DIM,
}

"""Human-readable stdout rendering for feature listings and configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from cairn.constants.branding import ASCII_LOGO_LINES, FEATURES_TITLE
from cairn.constants.reporting import ANSI_BOLD, ANSI_DIM, ANSI_RESET, STATE_COLORS
from cairn.features import FeatureRecord


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class FeatureListReporter:
    """Formats discovered features as an aligned table."""

    def __init__(self, records: list[FeatureRecord], library_dir: Path, *, color: bool = True) -> None:
        self._records = records
        self._library_dir = library_dir
        self._color = color

    def render(self) -> str:
        lines = [*ASCII_LOGO_LINES, ""]
        lines.append(self._style(f"{FEATURES_TITLE} ({len(self._records)}) in {self._library_dir}", ANSI_BOLD))
        if not self._records:
            lines.append(self._style("  (none)", ANSI_DIM))
            return "\n".join(lines)

        width = max(len(record.name) for record in self._records)
        for record in self._records:
            state = record.state.value
            styled_state = self._style(state, STATE_COLORS.get(state, ""))
            store_keys = ", ".join(sorted(str(key) for key in record.store)) if record.store else ""
            suffix = f"  store: {store_keys}" if store_keys else ""
            lines.append(f"  {record.name.ljust(width)}  {styled_state}{suffix}")
        return "\n".join(lines)

    def _style(self, text: str, color: str) -> str:
        return _colorize(text, color) if self._color and color else text


def render_configuration(bindings: dict[str, Any], source: Path | None) -> str:
    """Render published configuration bindings as YAML with a source header."""
    header = f"# source: {source}" if source is not None else "# no configuration published"
    if not bindings:
        return f"{header}\n{{}}"
    body = yaml.safe_dump(_plain(bindings), sort_keys=True, default_flow_style=False).rstrip()
    return f"{header}\n{body}"


def _plain(value: Any) -> Any:
    """Convert values into types ``yaml.safe_dump`` accepts, falling back to ``repr``."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (set, frozenset)):
        return [_plain(item) for item in sorted(value, key=repr)]
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return repr(value)

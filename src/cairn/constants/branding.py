"""Branding constants for help text and terminal output."""

from __future__ import annotations

BRAND_NAME: str = "CAIRN"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ CAIRN",
    "     // feature dispatcher with sandboxed configuration",
)
FEATURES_TITLE: str = "Features"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} feature dispatcher"))

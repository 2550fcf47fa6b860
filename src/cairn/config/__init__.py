"""Host settings loading and validation.

This package facade re-exports the public names so callers can use
``from cairn.config import ...``.
"""

from __future__ import annotations

from cairn.config.loader import load_settings
from cairn.config.model import CairnSettings
from cairn.config.validator import suggest_key, validate_settings_file

__all__ = [
    "CairnSettings",
    "load_settings",
    "suggest_key",
    "validate_settings_file",
]

"""Preflight validation shared by ``cairn validate-config`` and every other command."""

from __future__ import annotations

from pathlib import Path

from cairn.config import validate_settings_file
from cairn.constants.validation import CFG007
from cairn.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, settings_path: Path | None = None) -> list[ValidationError]:
    """Run all preflight checks and return errors in deterministic order.

    Returns an empty list when everything is valid.
    """
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG007,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    errors = validate_settings_file(root, settings_path, explicit=settings_path is not None)
    return sort_errors(errors)

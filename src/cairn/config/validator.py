"""Settings file validation for ``cairn validate-config``."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from cairn.constants.config import (
    PATH_SETTING_KEYS,
    SETTINGS_FILENAME,
    SUFFIX_SETTING_KEYS,
    VALID_LOG_LEVELS,
)
from cairn.constants.validation import ALLOWED_SETTINGS_KEYS, CFG001, CFG002, CFG003, CFG004, CFG005, CFG006
from cairn.exceptions.validation import ValidationError


def validate_settings_file(
    root: Path,
    settings_path: Path | None = None,
    *,
    explicit: bool = False,
) -> list[ValidationError]:
    """Validate a cairn.yaml file and return all validation errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = settings_path.resolve() if settings_path else (root / SETTINGS_FILENAME)
    path_str = str(path)

    if not path.exists():
        if explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"settings file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        line, column = _yaml_error_location(exc)
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
                line=line,
                column=column,
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"settings must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_SETTINGS_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=suggest_key(str(key), ALLOWED_SETTINGS_KEYS),
                )
            )

    for key in (*PATH_SETTING_KEYS, *SUFFIX_SETTING_KEYS):
        if key in raw and not _is_non_empty_string(raw[key]):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a non-empty string",
                )
            )

    for key in SUFFIX_SETTING_KEYS:
        if key in raw and _is_non_empty_string(raw[key]) and "/" in raw[key]:
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"`{key}` must not contain a path separator",
                )
            )

    if "log_level" in raw:
        val = raw["log_level"]
        if not isinstance(val, str) or val.upper() not in VALID_LOG_LEVELS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="log_level",
                    message="invalid value for `log_level`",
                    hint=f"expected one of: {', '.join(sorted(VALID_LOG_LEVELS))}; got: {val!r}",
                )
            )

    return errors


def suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a "did you mean" hint for a misspelled key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _yaml_error_location(exc: yaml.YAMLError) -> tuple[int | None, int | None]:
    mark = getattr(exc, "problem_mark", None)
    if mark is None:
        return None, None
    return mark.line + 1, mark.column + 1

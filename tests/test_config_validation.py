"""Tests for collect-all settings validation."""

from __future__ import annotations

from pathlib import Path

from cairn.config import suggest_key, validate_settings_file
from cairn.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007
from cairn.exceptions.validation import ValidationError, format_errors
from cairn.validation import preflight_validate


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "cairn.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_missing_default_file_is_valid(tmp_path: Path) -> None:
    assert validate_settings_file(tmp_path) == []


def test_missing_explicit_file(tmp_path: Path) -> None:
    errors = validate_settings_file(tmp_path, tmp_path / "nope.yaml", explicit=True)

    assert [e.code for e in errors] == [CFG001]


def test_invalid_yaml_reports_location(tmp_path: Path) -> None:
    _write(tmp_path, "library_dir: [unclosed\n")

    errors = validate_settings_file(tmp_path)

    assert [e.code for e in errors] == [CFG002]
    assert errors[0].line is not None


def test_non_mapping(tmp_path: Path) -> None:
    _write(tmp_path, "- a\n")

    errors = validate_settings_file(tmp_path)

    assert [e.code for e in errors] == [CFG003]


def test_collects_all_errors(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "\n".join(
            [
                "libary_dir: lib",
                "config_dir: 5",
                "feature_suffix: a/b",
                "log_level: LOUD",
            ]
        )
        + "\n",
    )

    errors = validate_settings_file(tmp_path)

    assert sorted(e.code for e in errors) == [CFG004, CFG005, CFG005, CFG006]
    unknown = next(e for e in errors if e.code == CFG004)
    assert unknown.field == "libary_dir"
    assert unknown.hint == "did you mean `library_dir`?"


def test_valid_file_has_no_errors(tmp_path: Path) -> None:
    _write(tmp_path, "library_dir: lib\nconfig_suffix: .cfg.py\nlog_level: warning\n")

    assert validate_settings_file(tmp_path) == []


def test_suggest_key_without_close_match() -> None:
    assert suggest_key("zzz", frozenset({"library_dir"})) == ""


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert [e.code for e in errors] == [CFG007]


def test_format_errors_groups_by_file_and_names_keys() -> None:
    errors = [
        ValidationError(code="CFG005", path="b.yaml", field="config_dir", message="invalid type"),
        ValidationError(code="CFG004", path="a.yaml", field="libary_dir", message="unknown key", hint="did you mean?"),
        ValidationError(code="CFG002", path="a.yaml", field="", message="invalid YAML", line=3, column=4),
    ]

    assert format_errors(errors).splitlines() == [
        "CFG002 a.yaml:3:4: invalid YAML",
        "CFG004 a.yaml [libary_dir]: unknown key",
        "    hint: did you mean?",
        "CFG005 b.yaml [config_dir]: invalid type",
    ]

"""Tests for host settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cairn.config import CairnSettings, load_settings
from cairn.constants.config import DEFAULT_CONFIG_SUFFIX, DEFAULT_FEATURE_SUFFIX
from cairn.exceptions import ConfigError


def test_load_settings_defaults_when_missing(tmp_path: Path) -> None:
    loaded = load_settings(tmp_path)

    assert loaded.library_dir == tmp_path.resolve() / "lib"
    assert loaded.config_dir == tmp_path.resolve() / "conf"
    assert loaded.feature_suffix == DEFAULT_FEATURE_SUFFIX
    assert loaded.config_suffix == DEFAULT_CONFIG_SUFFIX
    assert loaded.log_level == "INFO"


def test_load_settings_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "cairn.yaml").write_text("", encoding="utf-8")

    assert load_settings(tmp_path) == CairnSettings.for_root(tmp_path)


def test_load_settings_reads_values(tmp_path: Path) -> None:
    (tmp_path / "cairn.yaml").write_text(
        "\n".join(
            [
                "library_dir: features",
                "config_dir: /etc/cairn",
                "feature_suffix: .py",
                "config_suffix: .cfg",
                "log_level: debug",
            ]
        )
        + "\n",
        encoding="utf-8",
    )

    loaded = load_settings(tmp_path)

    assert loaded.library_dir == tmp_path.resolve() / "features"
    assert loaded.config_dir == Path("/etc/cairn")
    assert loaded.feature_suffix == ".py"
    assert loaded.config_suffix == ".cfg"
    assert loaded.log_level == "DEBUG"


def test_load_settings_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_settings(tmp_path, tmp_path / "other.yaml")


def test_load_settings_explicit_path(tmp_path: Path) -> None:
    settings_path = tmp_path / "custom.yaml"
    settings_path.write_text("library_dir: plugins\n", encoding="utf-8")

    loaded = load_settings(tmp_path, settings_path)

    assert loaded.library_dir == tmp_path.resolve() / "plugins"


@pytest.mark.parametrize(
    ("yaml_content", "expected_match"),
    [
        ("library_dir: [1, 2]\n", "library_dir"),
        ("config_dir: ''\n", "config_dir"),
        ("feature_suffix: 3\n", "feature_suffix"),
        ("config_suffix: a/b.py\n", "path separator"),
        ("log_level: LOUD\n", "log_level"),
        ("plugins: lib\n", "Unknown settings keys"),
        ("- a\n- b\n", "YAML mapping"),
        ("library_dir: [unclosed\n", "Invalid YAML"),
    ],
    ids=[
        "library_dir_type",
        "empty_config_dir",
        "feature_suffix_type",
        "suffix_separator",
        "bad_log_level",
        "unknown_key",
        "not_mapping",
        "invalid_yaml",
    ],
)
def test_load_settings_rejects_invalid_values(tmp_path: Path, yaml_content: str, expected_match: str) -> None:
    (tmp_path / "cairn.yaml").write_text(yaml_content, encoding="utf-8")

    with pytest.raises(ConfigError, match=expected_match):
        load_settings(tmp_path)


def test_settings_are_frozen() -> None:
    settings = CairnSettings()

    with pytest.raises(AttributeError):
        settings.log_level = "DEBUG"  # type: ignore[misc]

"""Tests for the feature list reporter and configuration rendering."""

from __future__ import annotations

from pathlib import Path

import yaml

from cairn.constants.reporting import ANSI_CYAN, ANSI_GREEN, ANSI_RESET
from cairn.features import FeatureRecord, FeatureState
from cairn.reporting import FeatureListReporter, render_configuration
from cairn.tables import seal


def _records() -> list[FeatureRecord]:
    return [
        FeatureRecord(name="greet", state=FeatureState.ENTRY_STORE, store={"x": 1, "default_name": "world"}),
        FeatureRecord(name="catalog", state=FeatureState.STORE, store={"colors": ()}),
        FeatureRecord(name="audit", state=FeatureState.NOOP),
    ]


def test_render_lists_features_aligned(tmp_path: Path) -> None:
    output = FeatureListReporter(_records(), tmp_path, color=False).render()

    lines = output.splitlines()
    assert f"Features (3) in {tmp_path}" in lines
    assert "  greet    entry+store  store: default_name, x" in lines
    assert "  catalog  store  store: colors" in lines
    assert "  audit    noop" in lines


def test_render_empty_listing(tmp_path: Path) -> None:
    output = FeatureListReporter([], tmp_path, color=False).render()

    assert output.endswith("Features (0) in " + str(tmp_path) + "\n  (none)")


def test_render_colors_states(tmp_path: Path) -> None:
    output = FeatureListReporter(_records(), tmp_path, color=True).render()

    assert f"{ANSI_GREEN}entry+store{ANSI_RESET}" in output
    assert f"{ANSI_CYAN}store{ANSI_RESET}" in output


def test_render_without_color_has_no_escape_codes(tmp_path: Path) -> None:
    output = FeatureListReporter(_records(), tmp_path, color=False).render()

    assert "\033[" not in output


def test_render_configuration_yaml(tmp_path: Path) -> None:
    source = tmp_path / "site.conf.py"
    bindings = {
        "ports": (8080, 8081),
        "limits": seal({"cpu": 2}),
        "tags": {"b", "a"},
        "handler": len,
    }

    output = render_configuration(bindings, source)

    header, _, body = output.partition("\n")
    assert header == f"# source: {source}"
    loaded = yaml.safe_load(body)
    assert loaded["ports"] == [8080, 8081]
    assert loaded["limits"] == {"cpu": 2}
    assert loaded["tags"] == ["a", "b"]
    assert loaded["handler"] == repr(len)


def test_render_configuration_empty() -> None:
    assert render_configuration({}, None) == "# no configuration published\n{}"

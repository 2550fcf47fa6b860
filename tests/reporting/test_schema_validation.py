"""Tests for JSON Schema validation of the feature listing payload."""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Any

import jsonschema
import pytest

from cairn.constants.reporting import FEATURES_SCHEMA_FILENAME, SCHEMA_VERSION
from cairn.features import FeatureRecord, FeatureState
from cairn.host import Host
from cairn.reporting import features_payload

SCHEMAS_DIR: Path = Path(__file__).resolve().parents[2] / "src" / "cairn" / "schemas"
FEATURES_SCHEMA_PATH: Path = SCHEMAS_DIR / FEATURES_SCHEMA_FILENAME


@pytest.fixture()
def features_schema() -> dict[str, Any]:
    """Load the feature listing JSON Schema."""
    return json.loads(FEATURES_SCHEMA_PATH.read_text(encoding="utf-8"))


def test_schema_is_valid_draft_2020_12(features_schema: dict[str, Any]) -> None:
    jsonschema.Draft202012Validator.check_schema(features_schema)


def test_payload_for_sample_workspace_validates(sample_workspace: Path, features_schema: dict[str, Any]) -> None:
    host = Host.from_root(sample_workspace)
    host.load_all_features()

    payload = features_payload(host.feature_records(), host.settings.library_dir)

    jsonschema.validate(payload, features_schema)
    assert payload["schema_version"] == SCHEMA_VERSION
    catalog = next(feature for feature in payload["features"] if feature["name"] == "catalog")
    assert catalog == {"name": "catalog", "state": "store", "has_entry": False, "store_keys": ["colors", "sizes"]}


def test_empty_payload_validates(tmp_path: Path, features_schema: dict[str, Any]) -> None:
    payload = features_payload([], tmp_path)

    jsonschema.validate(payload, features_schema)
    assert payload["features"] == []


def test_non_string_store_keys_are_stringified(tmp_path: Path, features_schema: dict[str, Any]) -> None:
    record = FeatureRecord(
        name="numbers",
        state=FeatureState.STORE,
        store=MappingProxyType({2: "b", 1: "a"}),
    )

    payload = features_payload([record], tmp_path)

    jsonschema.validate(payload, features_schema)
    assert payload["features"][0]["store_keys"] == ["1", "2"]


def test_schema_rejects_unknown_state(tmp_path: Path, features_schema: dict[str, Any]) -> None:
    payload = features_payload([FeatureRecord(name="x", state=FeatureState.NOOP)], tmp_path)
    payload["features"][0]["state"] = "exploded"

    with pytest.raises(jsonschema.ValidationError):
        jsonschema.validate(payload, features_schema)

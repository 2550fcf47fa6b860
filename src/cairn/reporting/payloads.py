"""JSON payload builders; shapes follow the bundled JSON schemas."""

from __future__ import annotations

from pathlib import Path

from cairn.constants.reporting import SCHEMA_VERSION
from cairn.features import FeatureRecord
from cairn.types import JsonObject


def features_payload(records: list[FeatureRecord], library_dir: Path) -> JsonObject:
    """Build the ``cairn list --format json`` payload."""
    return {
        "schema_version": SCHEMA_VERSION,
        "library_dir": str(library_dir),
        "features": [
            {
                "name": record.name,
                "state": record.state.value,
                "has_entry": record.entry is not None,
                "store_keys": sorted(str(key) for key in record.store) if record.store is not None else [],
            }
            for record in records
        ],
    }

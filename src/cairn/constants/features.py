"""Names of the fields a feature module may export, and loader bookkeeping."""

from __future__ import annotations

ENTRY_FIELD: str = "entry"
STORE_FIELD: str = "store"

# Names injected into a feature module namespace before it executes.
REGISTRY_GLOBAL: str = "registry"
FEATURE_NAME_GLOBAL: str = "feature_name"

FEATURE_MODULE_PREFIX: str = "cairn_features."

# Providers the host registers for feature code.
CONFIG_PROVIDER: str = "cairn.config"
STORE_PROVIDER: str = "cairn.store"

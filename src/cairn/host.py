"""Host facade wiring the registry, feature loader and configuration evaluator.

One :class:`Host` owns every piece of process-wide state: the provider
registry, the feature entry/store maps and the published configuration. The
CLI talks to nothing else.

Feature code reaches the host through two providers registered at start-up:
``cairn.config`` returns the published configuration bindings and
``cairn.store`` resolves another feature's store by name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from cairn.config import CairnSettings, load_settings
from cairn.constants.features import CONFIG_PROVIDER, STORE_PROVIDER
from cairn.dsl import ConfigurationEvaluator, SandboxBuilder
from cairn.exceptions import MissingFeatureEntry, UnknownFeature
from cairn.features import FeatureEntry, FeatureLoader, FeatureRecord
from cairn.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class Host:
    """Runs the discover, load, configure, dispatch sequence."""

    def __init__(self, settings: CairnSettings, registry: ProviderRegistry | None = None) -> None:
        self.settings = settings
        self.registry = registry if registry is not None else ProviderRegistry()
        self.sandbox = SandboxBuilder(self.registry)
        self.loader = FeatureLoader(settings.library_dir, settings.feature_suffix, self.registry)
        self.evaluator = ConfigurationEvaluator(settings.config_dir, settings.config_suffix, self.sandbox)
        self.registry.register(CONFIG_PROVIDER, lambda: self.configuration)
        self.registry.register(STORE_PROVIDER, self.resolve_store)

    @classmethod
    def from_root(cls, root: Path, settings_path: Path | None = None) -> Host:
        """Build a host from the settings file under ``root``."""
        return cls(load_settings(root, settings_path))

    def list_discoverable_features(self) -> list[str]:
        return self.loader.discover_feature_names()

    def load_all_features(self) -> list[str]:
        return self.loader.load_all_features()

    def reload(self) -> bool:
        return self.evaluator.reload()

    def resolve_entry(self, name: str) -> FeatureEntry | None:
        return self.loader.entry(name)

    def resolve_store(self, name: str) -> Mapping[str, Any] | None:
        return self.loader.store(name)

    def feature_records(self) -> list[FeatureRecord]:
        return [self.loader.record(name) for name in self.list_discoverable_features()]

    @property
    def configuration(self) -> dict[str, Any]:
        """Bindings of the currently published configuration."""
        return self.evaluator.bindings()

    def dispatch(self, name: str, args: Sequence[str] = ()) -> int:
        """Load features, reload configuration, then run ``name``'s entry with ``args``.

        Returns the entry's integer result, or 0 when it returns None. Any other
        result is logged and reported as 1.
        """
        if name not in self.list_discoverable_features():
            raise UnknownFeature(name, self.loader.feature_path(name))

        self.load_all_features()
        self.reload()

        entry = self.resolve_entry(name)
        if entry is None:
            raise MissingFeatureEntry(name)

        logger.debug("Dispatching %s with %d argument(s)", name, len(args))
        result = entry(list(args))
        if result is None:
            return 0
        if not isinstance(result, int):
            logger.error("Feature %s returned %r; expected an int or None", name, result)
            return 1
        return result

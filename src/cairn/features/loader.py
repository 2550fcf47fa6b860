"""Feature discovery and on-demand loading.

Feature files are trusted Python modules in the library directory, named
``<feature><suffix>``. Loading a feature executes its module once with the
full interpreter available, then inspects the module namespace for two
optional exports:

``entry``
    a callable taking the residual command-line arguments;
``store``
    a mapping of data the feature shares with the host.

A module may export either, both or neither. Loading is idempotent: once a
name has left the ``UNLOADED`` state it is never executed again.
"""

from __future__ import annotations

import importlib.machinery
import importlib.util
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from types import CodeType, MappingProxyType, ModuleType
from typing import Any

from cairn.constants.features import (
    ENTRY_FIELD,
    FEATURE_MODULE_PREFIX,
    FEATURE_NAME_GLOBAL,
    REGISTRY_GLOBAL,
    STORE_FIELD,
)
from cairn.exceptions import (
    FeatureLoadError,
    InvalidFeatureEntry,
    InvalidFeatureStore,
    LibraryDirectoryMissing,
    UnknownFeature,
)
from cairn.features.model import FeatureEntry, FeatureRecord, FeatureState
from cairn.io import directory_exists, file_exists, list_files_matching
from cairn.registry import ProviderRegistry

logger = logging.getLogger(__name__)


def _is_bare_name(name: str) -> bool:
    """True if ``name`` names a file directly inside the library directory."""
    return bool(name) and name not in (".", "..") and Path(name).name == name


class _FeatureFileLoader(importlib.machinery.SourceFileLoader):
    """Source loader that always compiles from source and never writes bytecode caches."""

    def get_code(self, fullname: str) -> CodeType:
        return self.source_to_code(self.get_data(self.path), self.path)


class FeatureLoader:
    """Discovers feature files and loads them into entry and store maps."""

    def __init__(self, library_dir: Path, suffix: str, registry: ProviderRegistry) -> None:
        self._library_dir = library_dir
        self._suffix = suffix
        self._registry = registry
        self._states: dict[str, FeatureState] = {}
        self._paths: dict[str, Path] = {}
        self._entries: dict[str, FeatureEntry] = {}
        self._stores: dict[str, Mapping[str, Any]] = {}

    @property
    def library_dir(self) -> Path:
        return self._library_dir

    def feature_path(self, name: str) -> Path:
        return self._library_dir / f"{name}{self._suffix}"

    def discover_feature_names(self) -> list[str]:
        """Return discoverable feature names in sorted order."""
        if not directory_exists(self._library_dir):
            raise LibraryDirectoryMissing("", self._library_dir)
        return list_files_matching(self._library_dir, self._suffix)

    def state(self, name: str) -> FeatureState:
        return self._states.get(name, FeatureState.UNLOADED)

    def entry(self, name: str) -> FeatureEntry | None:
        return self._entries.get(name)

    def store(self, name: str) -> Mapping[str, Any] | None:
        return self._stores.get(name)

    def record(self, name: str) -> FeatureRecord:
        return FeatureRecord(
            name=name,
            state=self.state(name),
            path=self._paths.get(name),
            entry=self._entries.get(name),
            store=self._stores.get(name),
        )

    def loaded_names(self) -> list[str]:
        return [name for name, state in self._states.items() if state.is_loaded]

    def load_feature(self, name: str) -> FeatureState:
        """Load ``name`` unless it was already loaded or is loading; return its state."""
        current = self.state(name)
        if current is not FeatureState.UNLOADED:
            logger.debug("Feature %s already %s; skipping", name, current.value)
            return current

        if not directory_exists(self._library_dir):
            raise LibraryDirectoryMissing(name, self._library_dir)
        path = self.feature_path(name)
        if not _is_bare_name(name) or not file_exists(path):
            raise UnknownFeature(name, path)

        self._states[name] = FeatureState.LOADING
        try:
            namespace = self._execute(name, path)
            entry, store = self._classify(name, namespace)
        except BaseException:
            del self._states[name]
            sys.modules.pop(f"{FEATURE_MODULE_PREFIX}{name}", None)
            raise

        if entry is not None:
            self._entries[name] = entry
        if store is not None:
            self._stores[name] = MappingProxyType(store)
        state = FeatureState.for_shape(has_entry=entry is not None, has_store=store is not None)
        self._states[name] = state
        self._paths[name] = path
        logger.debug("Loaded feature %s (%s) from %s", name, state.value, path)
        return state

    def load_all_features(self) -> list[str]:
        """Load every discoverable feature in order; return names loaded by this call.

        Stops at the first failure, leaving earlier features loaded.
        """
        loaded: list[str] = []
        for name in self.discover_feature_names():
            if self.state(name) is not FeatureState.UNLOADED:
                continue
            self.load_feature(name)
            loaded.append(name)
        if loaded:
            logger.info("Loaded %d feature(s): %s", len(loaded), ", ".join(loaded))
        return loaded

    def _execute(self, name: str, path: Path) -> Mapping[str, Any]:
        module_name = f"{FEATURE_MODULE_PREFIX}{name}"
        loader = _FeatureFileLoader(module_name, str(path))
        spec = importlib.util.spec_from_file_location(module_name, str(path), loader=loader)
        if spec is None:
            raise FeatureLoadError(name, path, ImportError(f"cannot build a module spec for {path}"))
        module: ModuleType = importlib.util.module_from_spec(spec)
        setattr(module, REGISTRY_GLOBAL, self._registry)
        setattr(module, FEATURE_NAME_GLOBAL, name)

        sys.modules[module_name] = module
        try:
            loader.exec_module(module)
        except Exception as exc:
            raise FeatureLoadError(name, path, exc) from exc
        return vars(module)

    def _classify(
        self,
        name: str,
        namespace: Mapping[str, Any],
    ) -> tuple[FeatureEntry | None, Mapping[str, Any] | None]:
        entry = namespace.get(ENTRY_FIELD)
        if entry is not None and not callable(entry):
            raise InvalidFeatureEntry(name, entry)

        store = namespace.get(STORE_FIELD)
        if store is not None and not isinstance(store, Mapping):
            raise InvalidFeatureStore(name, store)
        return entry, store

"""Feature load states and the per-feature record."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, TypeAlias

FeatureEntry: TypeAlias = Callable[[list[str]], int | None]


class FeatureState(str, Enum):
    """Lifecycle of one feature name. Every state after LOADING is terminal."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    ENTRY = "entry"
    STORE = "store"
    ENTRY_STORE = "entry+store"
    NOOP = "noop"

    @classmethod
    def for_shape(cls, *, has_entry: bool, has_store: bool) -> FeatureState:
        if has_entry and has_store:
            return cls.ENTRY_STORE
        if has_entry:
            return cls.ENTRY
        if has_store:
            return cls.STORE
        return cls.NOOP

    @property
    def is_loaded(self) -> bool:
        return self not in (FeatureState.UNLOADED, FeatureState.LOADING)


@dataclass(frozen=True)
class FeatureRecord:
    """What a loaded feature contributed."""

    name: str
    state: FeatureState
    path: Path | None = None
    entry: FeatureEntry | None = None
    store: Mapping[str, Any] | None = None

"""Shared exception hierarchy for Cairn."""

from __future__ import annotations

from .base import CairnError
from .config import ConfigError, ConfigurationError, ConfigurationEvalError, ConfigurationLoadError
from .features import (
    FeatureError,
    FeatureLoadError,
    InvalidFeatureEntry,
    InvalidFeatureStore,
    LibraryDirectoryMissing,
    MissingFeatureEntry,
    UnknownFeature,
)
from .protected import ProtectedWriteError
from .registry import InvalidProvider, RegistryError, UnknownProvider

__all__ = [
    "CairnError",
    "ConfigError",
    "ConfigurationError",
    "ConfigurationEvalError",
    "ConfigurationLoadError",
    "FeatureError",
    "FeatureLoadError",
    "InvalidFeatureEntry",
    "InvalidFeatureStore",
    "InvalidProvider",
    "LibraryDirectoryMissing",
    "MissingFeatureEntry",
    "ProtectedWriteError",
    "RegistryError",
    "UnknownFeature",
    "UnknownProvider",
]

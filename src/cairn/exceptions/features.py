"""Feature loading errors.

Every error carries the feature name so a failed batch can be diagnosed from
the message alone.
"""

from __future__ import annotations

from pathlib import Path

from cairn.exceptions.base import CairnError


class FeatureError(CairnError):
    """Base class for feature loading failures."""

    def __init__(self, feature: str, message: str) -> None:
        super().__init__(message)
        self.feature = feature


class LibraryDirectoryMissing(FeatureError):
    """Raised when the configured feature library directory does not exist."""

    def __init__(self, feature: str, directory: Path) -> None:
        label = f"cannot load feature '{feature}': " if feature else ""
        super().__init__(feature, f"{label}library directory not found: {directory}")
        self.directory = directory


class UnknownFeature(FeatureError):
    """Raised when no library file matches the requested feature name."""

    def __init__(self, feature: str, expected_path: Path) -> None:
        super().__init__(feature, f"unknown feature '{feature}' (expected {expected_path})")
        self.expected_path = expected_path


class InvalidFeatureEntry(FeatureError, TypeError):
    """Raised when a feature exports an ``entry`` that is not callable."""

    def __init__(self, feature: str, value: object) -> None:
        super().__init__(
            feature,
            f"feature '{feature}': 'entry' must be callable, got {type(value).__name__}",
        )


class InvalidFeatureStore(FeatureError, TypeError):
    """Raised when a feature exports a ``store`` that is not a mapping."""

    def __init__(self, feature: str, value: object) -> None:
        super().__init__(
            feature,
            f"feature '{feature}': 'store' must be a mapping, got {type(value).__name__}",
        )


class FeatureLoadError(FeatureError):
    """Raised when a feature module fails to compile or execute."""

    def __init__(self, feature: str, path: Path, cause: BaseException) -> None:
        super().__init__(feature, f"feature '{feature}' failed to load from {path}: {cause}")
        self.path = path
        self.cause = cause


class MissingFeatureEntry(FeatureError):
    """Raised when dispatching a feature that exports no ``entry``."""

    def __init__(self, feature: str) -> None:
        super().__init__(feature, f"feature '{feature}' has no entry point")

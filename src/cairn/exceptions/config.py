"""Settings and configuration-evaluation exceptions."""

from __future__ import annotations

from pathlib import Path

from cairn.exceptions.base import CairnError


class ConfigError(CairnError, ValueError):
    """Raised when host settings are invalid."""


class ConfigurationError(CairnError):
    """Base class for failures while evaluating a configuration file."""

    stage: str = "evaluate"

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"{path}: failed to {self.stage} configuration: {type(cause).__name__}: {cause}")
        self.path = path
        self.cause = cause


class ConfigurationLoadError(ConfigurationError):
    """Raised when a configuration file cannot be compiled."""

    stage = "compile"


class ConfigurationEvalError(ConfigurationError):
    """Raised when a configuration file fails while executing in its sandbox."""

    stage = "evaluate"

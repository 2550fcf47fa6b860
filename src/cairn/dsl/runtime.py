"""Configuration evaluator.

Evaluates every configuration file in the configured directory, each inside
its own fresh sandbox, and publishes the sandbox of the last file evaluated
as the current configuration. Results are not merged across files: the last
file in listing order replaces whatever an earlier file published.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from cairn.dsl.compiler import compile_configuration
from cairn.dsl.sandbox import SandboxBuilder, SandboxContext
from cairn.exceptions import ConfigurationEvalError, ConfigurationLoadError
from cairn.io import directory_exists, list_files_matching, read_file

logger = logging.getLogger(__name__)


class ConfigurationEvaluator:
    """Re-evaluates configuration files and holds the published result."""

    def __init__(self, config_dir: Path, suffix: str, sandbox_builder: SandboxBuilder) -> None:
        self._config_dir = config_dir
        self._suffix = suffix
        self._builder = sandbox_builder
        self._current: SandboxContext | None = None
        self._current_source: Path | None = None

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def current(self) -> SandboxContext | None:
        """The published configuration, or None if nothing was ever published."""
        return self._current

    @property
    def current_source(self) -> Path | None:
        return self._current_source

    def bindings(self) -> dict[str, Any]:
        """Plain copy of the published top-level bindings."""
        if self._current is None:
            return {}
        return self._current.bindings()

    def config_files(self) -> list[Path]:
        names = list_files_matching(self._config_dir, self._suffix)
        return [self._config_dir / f"{name}{self._suffix}" for name in names]

    def reload(self) -> bool:
        """Evaluate all configuration files; return True if a result was published.

        A missing directory or an empty one is logged and leaves the published
        result untouched. Compile and runtime failures abort the whole reload.
        """
        if not directory_exists(self._config_dir):
            logger.warning("Configuration directory not found: %s", self._config_dir)
            return False

        paths = self.config_files()
        if not paths:
            logger.warning("No configuration files matching *%s in %s", self._suffix, self._config_dir)
            return False

        for path in paths:
            sandbox = self._evaluate(path)
            if self._current is not None and self._current_source != path:
                logger.debug("Configuration %s replaces %s", path, self._current_source)
            self._current = sandbox
            self._current_source = path
            logger.debug("Published configuration from %s (%d bindings)", path, len(sandbox))
        return True

    def _evaluate(self, path: Path) -> SandboxContext:
        try:
            source = read_file(path)
        except UnicodeDecodeError as exc:
            raise ConfigurationLoadError(path, exc) from exc
        code = compile_configuration(source, path)
        sandbox = self._builder.new_sandbox()
        try:
            sandbox.run(code, self._builder.execution_builtins())
        except Exception as exc:
            raise ConfigurationEvalError(path, exc) from exc
        return sandbox

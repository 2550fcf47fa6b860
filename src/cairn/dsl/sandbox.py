"""Capability-restricted execution contexts for configuration code.

Configuration files are untrusted. They run with a ``__builtins__`` mapping
built from the allow-list below and nothing else: no import machinery, no
file or process access, no environment, and no way to register providers.
"""

from __future__ import annotations

import builtins
import logging
import math
import time
from collections.abc import Mapping
from types import CodeType
from typing import Any

from cairn.constants.sandbox import (
    CONFIG_LOGGER_NAME,
    DEFAULT_TIME_FORMAT,
    MATH_CONSTANTS,
    MATH_FUNCTION_NAMES,
    SAFE_BUILTIN_NAMES,
    SELECT_COUNT,
)
from cairn.registry import ProviderRegistry
from cairn.tables import Overlay, ProtectedTable, seal
from cairn.utils import arrays, tables

logger = logging.getLogger(__name__)
config_logger = logging.getLogger(CONFIG_LOGGER_NAME)


def pairs(mapping: Mapping[Any, Any]) -> tuple[tuple[Any, Any], ...]:
    """Return the ``(key, value)`` pairs of ``mapping`` in iteration order."""
    return tuple(mapping.items())


def select(index: int | str, *values: Any) -> Any:
    """Pick from a variadic argument list.

    ``select("#", ...)`` returns the number of values. A positive index returns
    the values from that 1-based position onwards; a negative index counts
    back from the end.
    """
    if index == SELECT_COUNT:
        return len(values)
    if not isinstance(index, int) or isinstance(index, bool) or index == 0:
        raise ValueError(f"select index must be a non-zero integer or '{SELECT_COUNT}', got {index!r}")
    if index > 0:
        return values[index - 1 :]
    if -index > len(values):
        raise ValueError(f"select index {index} is out of range for {len(values)} values")
    return values[index:]


def log(message: str, *args: Any) -> None:
    """Emit an info message on the configuration logger."""
    config_logger.info(message, *args)


def _today() -> str:
    return time.strftime("%Y-%m-%d")


def _strftime(fmt: str = DEFAULT_TIME_FORMAT, timestamp: float | None = None) -> str:
    return time.strftime(fmt, time.localtime(timestamp))


def _string_namespace() -> ProtectedTable:
    return seal(
        {
            "upper": str.upper,
            "lower": str.lower,
            "title": str.title,
            "strip": str.strip,
            "lstrip": str.lstrip,
            "rstrip": str.rstrip,
            "split": str.split,
            "join": lambda delimiter, items: delimiter.join(items),
            "replace": str.replace,
            "startswith": str.startswith,
            "endswith": str.endswith,
            "find": str.find,
            "ljust": str.ljust,
            "rjust": str.rjust,
            "repeat": lambda text, times: text * times,
            "length": len,
        },
        {"name": "string"},
    )


def _math_namespace() -> ProtectedTable:
    entries: dict[str, Any] = {name: getattr(math, name) for name in MATH_FUNCTION_NAMES}
    entries.update(MATH_CONSTANTS)
    return seal(entries, {"name": "math"})


def _time_namespace() -> ProtectedTable:
    return seal(
        {
            "now": time.time,
            "monotonic": time.monotonic,
            "today": _today,
            "strftime": _strftime,
        },
        {"name": "time"},
    )


class SandboxContext(Overlay):
    """Overlay over the allow-list that also serves as the code's global namespace.

    Top-level assignments land in the overlay's own entries. Because the same
    dict backs the globals of the executed code, functions and comprehensions
    defined by configuration code see those bindings too.
    """

    __slots__ = ()

    def run(self, code: CodeType, builtins_map: dict[str, Any]) -> None:
        namespace = self._own
        namespace["__builtins__"] = builtins_map
        try:
            exec(code, namespace, self)  # noqa: S102
        finally:
            namespace.pop("__builtins__", None)


class SandboxBuilder:
    """Builds the shared allow-list once and hands out fresh sandboxes over it."""

    def __init__(self, registry: ProviderRegistry) -> None:
        self._registry = registry
        self._allow_list: ProtectedTable | None = None

    def build_allow_list(self) -> ProtectedTable:
        """Return the process-wide allow-list, building it on first use."""
        if self._allow_list is None:
            self._allow_list = self._build()
            logger.debug("Sandbox allow-list built with %d capabilities", len(self._allow_list))
        return self._allow_list

    def new_sandbox(self) -> SandboxContext:
        """Return an empty overlay whose only backing container is the allow-list."""
        return SandboxContext(self.build_allow_list())

    def execution_builtins(self) -> dict[str, Any]:
        """Fresh ``__builtins__`` dict for one execution; edits never reach the allow-list."""
        return dict(self.build_allow_list())

    def _build(self) -> ProtectedTable:
        capabilities: dict[str, Any] = {name: getattr(builtins, name) for name in SAFE_BUILTIN_NAMES}
        capabilities.update(
            {
                "pairs": pairs,
                "select": select,
                "log": log,
                "math": _math_namespace(),
                "string": _string_namespace(),
                "time": _time_namespace(),
                "table": seal(tables.EXPORTS, {"name": "table"}),
                "array": seal(arrays.EXPORTS, {"name": "array"}),
                "providers": self._registry.view(),
            }
        )
        return seal(capabilities, {"name": "allow-list"})

"""Process-wide provider registry.

Maps provider names to factory callables. The host owns one instance and
hands it to the feature loader (which may register into it) and to the
sandbox builder (which only ever exposes a read-only view).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, TypeAlias

from cairn.exceptions import InvalidProvider, UnknownProvider

logger = logging.getLogger(__name__)

ProviderFactory: TypeAlias = Callable[..., Any]


class ProviderRegistry:
    """Name to factory mapping with last-registration-wins semantics."""

    def __init__(self) -> None:
        self._providers: dict[str, ProviderFactory] = {}

    def register(self, name: str, factory: ProviderFactory) -> None:
        """Register ``factory`` under ``name``, replacing any previous registration."""
        if not callable(factory):
            raise InvalidProvider(name, factory)
        if name in self._providers:
            logger.debug("Provider %s re-registered; previous factory replaced", name)
        self._providers[name] = factory

    def resolve(self, name: str) -> ProviderFactory | None:
        """Return the factory registered under ``name``, or None."""
        return self._providers.get(name)

    def require(self, name: str) -> ProviderFactory:
        """Return the factory registered under ``name``; raise UnknownProvider if absent."""
        factory = self._providers.get(name)
        if factory is None:
            raise UnknownProvider(name)
        if not callable(factory):
            raise InvalidProvider(name, factory)
        return factory

    def names(self) -> list[str]:
        return sorted(self._providers)

    def view(self) -> Mapping[str, ProviderFactory]:
        """Read-only live view; later registrations show through."""
        return MappingProxyType(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)

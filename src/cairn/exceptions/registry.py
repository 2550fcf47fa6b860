"""Provider registry errors."""

from __future__ import annotations

from cairn.exceptions.base import CairnError


class RegistryError(CairnError):
    """Base class for provider registry misuse."""

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class InvalidProvider(RegistryError, TypeError):
    """Raised when a provider factory is not callable."""

    def __init__(self, provider: str, factory: object) -> None:
        super().__init__(
            provider,
            f"provider '{provider}' must be callable, got {type(factory).__name__}",
        )


class UnknownProvider(RegistryError, KeyError):
    """Raised when a required provider has not been registered."""

    def __init__(self, provider: str) -> None:
        super().__init__(provider, f"provider '{provider}' is not registered")

    def __str__(self) -> str:
        return self.args[0]

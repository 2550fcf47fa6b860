"""Errors raised by sealed containers."""

from __future__ import annotations

from cairn.exceptions.base import CairnError


class ProtectedWriteError(CairnError, TypeError):
    """Raised on any attempt to mutate a sealed table."""

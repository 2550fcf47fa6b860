"""Root of the Cairn exception hierarchy."""

from __future__ import annotations


class CairnError(Exception):
    """Base class for all errors raised by Cairn."""

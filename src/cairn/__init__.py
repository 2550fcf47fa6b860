"""Cairn: plugin-style feature dispatcher with sandboxed configuration."""

__version__ = "0.3.0"

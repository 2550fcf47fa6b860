"""Shared type aliases for Cairn."""

from .common import JsonObject, JsonScalar, JsonValue

__all__ = ["JsonObject", "JsonScalar", "JsonValue"]

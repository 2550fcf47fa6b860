"""Immutable and layered key/value containers."""

from .protected import EMPTY, CallableProtectedTable, Overlay, ProtectedTable, dump, seal

__all__ = ["EMPTY", "CallableProtectedTable", "Overlay", "ProtectedTable", "dump", "seal"]

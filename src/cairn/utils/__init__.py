"""Pure helpers exposed to configuration code as the ``table`` and ``array`` namespaces."""

from . import arrays, tables

__all__ = ["arrays", "tables"]

"""Pure helpers over key/value tables.

None of these functions mutate their inputs; each returns a new value.
Counters passed to callbacks are 1-based and follow iteration order.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any


def count(source: Mapping[Any, Any]) -> int:
    """Return the number of entries in ``source``."""
    return len(source)


def filter(source: Mapping[Any, Any], predicate: Callable[[Any, Any, int], bool]) -> dict[Any, Any]:  # noqa: A001
    """Keep the entries for which ``predicate(key, value, counter)`` is truthy."""
    return {
        key: value
        for counter, (key, value) in enumerate(source.items(), start=1)
        if predicate(key, value, counter)
    }


def map(source: Mapping[Any, Any], converter: Callable[[Any, Any, int], Any]) -> tuple[Any, ...]:  # noqa: A001
    """Convert each entry with ``converter(value, key, counter)`` into an ordered tuple."""
    return tuple(converter(value, key, counter) for counter, (key, value) in enumerate(source.items(), start=1))


def _default_converter(value: Any, _key: Any, _counter: int) -> str:
    return str(value)


def join(
    source: Mapping[Any, Any],
    delimiter: str = "",
    converter: Callable[[Any, Any, int], str] | None = None,
) -> str:
    """Join converted entry values with ``delimiter``."""
    return delimiter.join(map(source, converter or _default_converter))


def group_by(source: Mapping[Any, Any], key_selector: Callable[[Any, Any, int], Hashable]) -> dict[Hashable, tuple[Any, ...]]:
    """Bucket values by ``key_selector(value, key, counter)``; buckets keep iteration order."""
    buckets: dict[Hashable, list[Any]] = {}
    for counter, (key, value) in enumerate(source.items(), start=1):
        buckets.setdefault(key_selector(value, key, counter), []).append(value)
    return {bucket: tuple(values) for bucket, values in buckets.items()}


def keys_of(source: Mapping[Any, Any]) -> tuple[Any, ...]:
    return tuple(source.keys())


def values_of(source: Mapping[Any, Any]) -> tuple[Any, ...]:
    return tuple(source.values())


def merge(*sources: Mapping[Any, Any]) -> dict[Any, Any]:
    """Merge mappings left to right into a new dict; later sources win."""
    merged: dict[Any, Any] = {}
    for source in sources:
        merged.update(source)
    return merged


def pairs(source: Mapping[Any, Any]) -> tuple[tuple[Any, Any], ...]:
    """Return ``(key, value)`` pairs in iteration order."""
    return tuple(source.items())


EXPORTS: dict[str, Callable[..., Any]] = {
    "count": count,
    "filter": filter,
    "map": map,
    "join": join,
    "group_by": group_by,
    "keys_of": keys_of,
    "values_of": values_of,
    "merge": merge,
    "pairs": pairs,
}

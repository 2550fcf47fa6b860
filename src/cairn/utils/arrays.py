"""Helpers for building ordered sequences. Every helper returns a tuple."""

from __future__ import annotations

import builtins
from collections.abc import Callable, Iterable, Sequence
from typing import Any


def of(*items: Any) -> tuple[Any, ...]:
    return items


def range(*args: int) -> tuple[int, ...]:  # noqa: A001
    return tuple(builtins.range(*args))


def concat(*sequences: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(item for sequence in sequences for item in sequence)


def reverse(sequence: Iterable[Any]) -> tuple[Any, ...]:
    return tuple(reversed(tuple(sequence)))


def sort(
    sequence: Iterable[Any],
    key: Callable[[Any], Any] | None = None,
    reverse: bool = False,
) -> tuple[Any, ...]:
    return tuple(sorted(sequence, key=key, reverse=reverse))


def chunk(sequence: Sequence[Any], size: int) -> tuple[tuple[Any, ...], ...]:
    """Split ``sequence`` into consecutive tuples of at most ``size`` items."""
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    items = tuple(sequence)
    return tuple(items[start : start + size] for start in builtins.range(0, len(items), size))


def flatten(sequences: Iterable[Iterable[Any]]) -> tuple[Any, ...]:
    return concat(*sequences)


EXPORTS: dict[str, Callable[..., Any]] = {
    "of": of,
    "range": range,
    "concat": concat,
    "reverse": reverse,
    "sort": sort,
    "chunk": chunk,
    "flatten": flatten,
}

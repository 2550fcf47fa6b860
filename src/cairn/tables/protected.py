"""Sealed tables and overlay views.

A :class:`ProtectedTable` is a read-only mapping that owns a private shallow
copy of its source, so nothing outside it can change what it holds once it is
built. An :class:`Overlay` is a mutable mapping that shadows one or more
backing containers without ever writing to them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any, NoReturn, TypeAlias

from cairn.exceptions import ProtectedWriteError

PROTOCOL_KEYS: frozenset[str] = frozenset({"name", "call"})

TableKey: TypeAlias = str | int


def dump(source: Mapping[Any, Any] | None, target: MutableMapping[Any, Any] | None = None) -> MutableMapping[Any, Any]:
    """Shallow-copy entries of ``source`` into ``target`` (or a new dict) and return it."""
    if target is None:
        target = {}
    if source is None:
        return target
    for key, value in source.items():
        target[key] = value
    return target


class ProtectedTable(Mapping[TableKey, Any]):
    """Immutable key/value table.

    Keys must be strings or integers. Entries are readable with ``table[key]``
    and, for identifier keys that do not collide with a mapping method, as
    attributes (``table.floor``). Every write raises :class:`ProtectedWriteError`.
    """

    __slots__ = ("_entries", "_name")

    def __init__(self, source: Mapping[Any, Any] | None = None, *, name: str | None = None) -> None:
        entries = dump(source)
        for key in entries:
            if not isinstance(key, (str, int)):
                raise TypeError(f"protected table keys must be str or int, got {type(key).__name__}")
        object.__setattr__(self, "_entries", entries)
        object.__setattr__(self, "_name", name)

    @property
    def name(self) -> str | None:
        return self._name

    def __getitem__(self, key: TableKey) -> Any:
        return self._entries[key]

    def __iter__(self) -> Iterator[TableKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __getattr__(self, key: str) -> Any:
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._entries[key]
        except KeyError:
            raise AttributeError(f"{self._label()} has no entry '{key}'") from None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._label()}, {self._entries!r})"

    def _label(self) -> str:
        return f"'{self._name}'" if self._name else "<anonymous>"

    def _reject(self, *_args: Any, **_kwargs: Any) -> NoReturn:
        raise ProtectedWriteError(f"table {self._label()} is protected")

    __setitem__ = _reject
    __delitem__ = _reject
    __setattr__ = _reject
    __delattr__ = _reject
    update = _reject
    pop = _reject
    popitem = _reject
    setdefault = _reject
    clear = _reject


class CallableProtectedTable(ProtectedTable):
    """Protected table that forwards calls to a ``call`` protocol hook."""

    __slots__ = ("_call",)

    def __init__(
        self,
        source: Mapping[Any, Any] | None = None,
        *,
        name: str | None = None,
        call: Callable[..., Any],
    ) -> None:
        super().__init__(source, name=name)
        object.__setattr__(self, "_call", call)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._call(*args, **kwargs)


def seal(source: Mapping[Any, Any] | None = None, protocol: Mapping[str, Any] | None = None) -> ProtectedTable:
    """Copy ``source`` into a new protected table, applying optional protocol hooks.

    Supported protocol keys are ``name`` (shown in ``repr`` and error messages)
    and ``call`` (makes the table callable).
    """
    options = dict(protocol or {})
    unknown = set(options) - PROTOCOL_KEYS
    if unknown:
        raise ValueError(f"unknown protocol keys: {sorted(unknown)}")

    call = options.get("call")
    if call is not None:
        if not callable(call):
            raise TypeError("protocol 'call' must be callable")
        return CallableProtectedTable(source, name=options.get("name"), call=call)
    return ProtectedTable(source, name=options.get("name"))


EMPTY: ProtectedTable = seal(protocol={"name": "empty"})


class Overlay(MutableMapping[Any, Any]):
    """Mutable view whose own entries shadow a chain of backing containers.

    Reads fall through the chain in order and the first match wins. Writes and
    deletes only ever touch the overlay's own entries. Iteration and ``len``
    cover the own entries, which is what callers treat as the overlay's
    bindings.
    """

    __slots__ = ("_own", "_chain")

    def __init__(self, *chain: Mapping[Any, Any], own: Mapping[Any, Any] | None = None) -> None:
        self._chain: tuple[Mapping[Any, Any], ...] = chain
        self._own: dict[Any, Any] = dict(own) if own is not None else {}

    @property
    def chain(self) -> tuple[Mapping[Any, Any], ...]:
        return self._chain

    @property
    def own(self) -> Mapping[Any, Any]:
        """Read-only live view of the overlay's own entries."""
        return MappingProxyType(self._own)

    def bindings(self) -> dict[Any, Any]:
        """Return a plain dict copy of the own entries."""
        return dict(self._own)

    def __getitem__(self, key: Any) -> Any:
        if key in self._own:
            return self._own[key]
        for backing in self._chain:
            if key in backing:
                return backing[key]
        raise KeyError(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        self._own[key] = value

    def __delitem__(self, key: Any) -> None:
        if key not in self._own:
            raise KeyError(key)
        del self._own[key]

    def __contains__(self, key: object) -> bool:
        return key in self._own or any(key in backing for backing in self._chain)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._own)

    def __len__(self) -> int:
        return len(self._own)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._own!r}, chain={len(self._chain)})"

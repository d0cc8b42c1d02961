"""Lazy iterators over a native map's entries.

Each iterator keeps a reference to the object that produced it, so the
map it walks stays alive for as long as the iterator is reachable.
"""

from collections.abc import Iterator
from typing import Any

from .native.base import Entry, NativeMap


class _EntryIterator(Iterator):
    __slots__ = ("_owner", "_cursor")

    def __init__(self, owner: Any, native: NativeMap) -> None:
        self._owner = owner
        self._cursor = native.begin()

    def __next__(self) -> Any:
        return self._project(next(self._cursor))

    def _project(self, entry: Entry) -> Any:
        raise NotImplementedError


class ItemIterator(_EntryIterator):
    """Yields ``(key, value)`` tuples."""

    __slots__ = ()

    def _project(self, entry: Entry) -> tuple[Any, Any]:
        return entry.key, entry.value


class KeyIterator(_EntryIterator):
    """Yields keys."""

    __slots__ = ()

    def _project(self, entry: Entry) -> Any:
        return entry.key


class ValueIterator(_EntryIterator):
    """Yields values (the stored objects themselves)."""

    __slots__ = ()

    def _project(self, entry: Entry) -> Any:
        return entry.value


def make_iterator(owner: Any, native: NativeMap) -> ItemIterator:
    return ItemIterator(owner, native)


def make_key_iterator(owner: Any, native: NativeMap) -> KeyIterator:
    return KeyIterator(owner, native)


def make_value_iterator(owner: Any, native: NativeMap) -> ValueIterator:
    return ValueIterator(owner, native)

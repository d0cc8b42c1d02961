"""Insertion-ordered native map."""

from typing import Any, Iterator

from .base import Entry, NativeMap


class OrderedMap(NativeMap):
    """A dict-backed native map iterating in insertion order.

    Overwriting an entry in place keeps its position; erasing and
    re-inserting a key moves it to the end.
    """

    def __init__(self) -> None:
        self._entries: dict[Any, Entry] = {}

    def find(self, key: Any) -> Entry | None:
        return self._entries.get(key)

    def emplace(self, key: Any, value: Any) -> tuple[Entry, bool]:
        entry = self._entries.get(key)
        if entry is not None:
            return entry, False
        entry = self._entries[key] = Entry(key, value)
        return entry, True

    def erase(self, entry: Entry) -> None:
        del self._entries[entry.key]

    def size(self) -> int:
        return len(self._entries)

    def begin(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()

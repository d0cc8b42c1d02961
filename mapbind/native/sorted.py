"""Key-ordered native map."""

from bisect import bisect_left
from typing import Any, Iterator

from .base import Entry, NativeMap


class SortedMap(NativeMap):
    """A native map iterating in ascending key order.

    Keys are kept in a sorted list next to a dict index, so lookups
    are O(1) and inserts/erases are O(n). Keys must be hashable and
    mutually orderable.
    """

    def __init__(self) -> None:
        self._keys: list[Any] = []
        self._entries: dict[Any, Entry] = {}
        self._version = 0

    def find(self, key: Any) -> Entry | None:
        return self._entries.get(key)

    def emplace(self, key: Any, value: Any) -> tuple[Entry, bool]:
        entry = self._entries.get(key)
        if entry is not None:
            return entry, False
        self._keys.insert(bisect_left(self._keys, key), key)
        entry = self._entries[key] = Entry(key, value)
        self._version += 1
        return entry, True

    def erase(self, entry: Entry) -> None:
        key = entry.key
        del self._entries[key]
        i = bisect_left(self._keys, key)
        if i == len(self._keys) or not _same_key(self._keys[i], key):
            # Unordered keys (NaN) can defeat the bisect; match as dict does.
            i = next(j for j, k in enumerate(self._keys) if _same_key(k, key))
        del self._keys[i]
        self._version += 1

    def size(self) -> int:
        return len(self._entries)

    def begin(self) -> Iterator[Entry]:
        return self._walk(self._version)

    def _walk(self, version: int) -> Iterator[Entry]:
        for key in self._keys:
            if self._version != version:
                raise RuntimeError("SortedMap changed size during iteration")
            yield self._entries[key]
        if self._version != version:
            raise RuntimeError("SortedMap changed size during iteration")

    def clear(self) -> None:
        self._keys.clear()
        self._entries.clear()
        self._version += 1


def _same_key(a: Any, b: Any) -> bool:
    return a is b or a == b

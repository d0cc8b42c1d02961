"""Abstract native map interface."""

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any, ClassVar, Iterator


class Entry:
    """A single key/value slot owned by a ``NativeMap``.

    Assigning ``value`` overwrites the slot in place; the entry keeps
    its position in the map's iteration order.
    """

    __slots__ = ("key", "value")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value

    def __repr__(self) -> str:
        return f"Entry({self.key!r}, {self.value!r})"


class NativeMap(ABC):
    """Associative container with unique keys.

    This is the storage an adapter produced by ``bind_map`` delegates
    to. Iteration order is whatever the implementation defines
    (insertion, sorted, ...); nothing above this layer reorders it.

    Subclasses are specialised for a key and value type through the
    ``key_type`` and ``value_type`` class attributes.
    """

    key_type: ClassVar[type] = Hashable
    value_type: ClassVar[type] = object

    @abstractmethod
    def find(self, key: Any) -> Entry | None:
        """Return the entry for key, or None if absent."""

    @abstractmethod
    def emplace(self, key: Any, value: Any) -> tuple[Entry, bool]:
        """Insert key/value if key is absent.

        Returns the entry now stored under key and whether an
        insertion happened. An existing entry is left untouched.
        """

    @abstractmethod
    def erase(self, entry: Entry) -> None:
        """Remove an entry previously returned by this map."""

    @abstractmethod
    def size(self) -> int:
        """Number of entries."""

    @abstractmethod
    def begin(self) -> Iterator[Entry]:
        """Iterate over entries in native order.

        Inserting or erasing while the iterator is live invalidates
        it; the next advance raises ``RuntimeError``.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries."""

    def empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Entry]:
        return self.begin()

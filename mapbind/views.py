"""Key, value and item views over a bound map.

A view holds a reference to the map that created it and never copies
its contents: iterating a view always reflects the map's current state.
"""

from typing import Any, Iterator

from .iterators import make_iterator, make_key_iterator, make_value_iterator


class _View:
    __slots__ = ("_map",)

    def __init__(self, mapping: Any) -> None:
        self._map = mapping

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{type(self).__qualname__}({list(self)!r})"


class KeyView(_View):
    __slots__ = ()

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[Any]:
        return make_key_iterator(self._map, self._map._native)


class ValueView(_View):
    __slots__ = ()

    def __iter__(self) -> Iterator[Any]:
        return make_value_iterator(self._map, self._map._native)


class ItemView(_View):
    __slots__ = ()

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return make_iterator(self._map, self._map._native)

"""mapbind: mapping-protocol adapters over native associative containers."""

from .binding import bind_map
from .errors import BindError, KeyNotFound
from .iterators import (
    ItemIterator,
    KeyIterator,
    ValueIterator,
    make_iterator,
    make_key_iterator,
    make_value_iterator,
)
from .maptype import map_type
from .native import Entry, NativeMap, OrderedMap, SortedMap
from .traits import is_copy_assignable, is_copy_constructible, no_copy, no_copy_assign
from .views import ItemView, KeyView, ValueView

__all__ = [
    "BindError",
    "Entry",
    "ItemIterator",
    "ItemView",
    "KeyIterator",
    "KeyNotFound",
    "KeyView",
    "NativeMap",
    "OrderedMap",
    "SortedMap",
    "ValueIterator",
    "ValueView",
    "bind_map",
    "is_copy_assignable",
    "is_copy_constructible",
    "make_iterator",
    "make_key_iterator",
    "make_value_iterator",
    "map_type",
    "no_copy",
    "no_copy_assign",
]

"""Native map backends."""

from .base import Entry, NativeMap
from .ordered import OrderedMap
from .sorted import SortedMap

__all__ = ["Entry", "NativeMap", "OrderedMap", "SortedMap"]

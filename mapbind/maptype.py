"""Factory for specialised native map types."""

from collections.abc import Hashable

from .native.base import NativeMap


def map_type(
    storage: str = "ordered",
    *,
    key_type: type = Hashable,
    value_type: type = object,
    name: str | None = None,
) -> type[NativeMap]:
    """Create a ``NativeMap`` subclass for a key and value type.

    Args:
        storage: ``"ordered"`` (default, insertion order) or
            ``"sorted"`` (ascending key order).
        key_type: Type every key must be an instance of.
        value_type: Type every value must be an instance of. Its
            traits decide how ``bind_map`` implements item assignment.
        name: Class name (default derived from storage and types).

    Returns:
        A new ``NativeMap`` subclass; instantiate it for an empty map.
    """
    if storage == "ordered":
        from .native.ordered import OrderedMap

        base: type[NativeMap] = OrderedMap
    elif storage == "sorted":
        from .native.sorted import SortedMap

        base = SortedMap
    else:
        raise ValueError(f"Unknown storage: {storage!r}")

    if not isinstance(key_type, type):
        raise TypeError(f"key_type must be a type, not {type(key_type).__name__}")
    if not isinstance(value_type, type):
        raise TypeError(
            f"value_type must be a type, not {type(value_type).__name__}"
        )

    if name is None:
        name = f"{base.__name__}[{key_type.__name__}, {value_type.__name__}]"
    return type(
        name,
        (base,),
        {
            "key_type": key_type,
            "value_type": value_type,
            "__module__": base.__module__,
        },
    )

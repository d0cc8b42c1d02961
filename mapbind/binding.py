"""Mapping classes generated over native map types."""

import logging
import types
from collections.abc import Mapping, MutableMapping
from typing import Any, Callable, Iterator

from . import views
from .errors import BindError, KeyNotFound
from .iterators import make_key_iterator
from .native.base import Entry, NativeMap
from .traits import is_copy_assignable, is_copy_constructible

logger = logging.getLogger(__name__)


def bind_map(
    scope: Any,
    name: str,
    map_type: type[NativeMap],
    *,
    doc: str | None = None,
) -> type:
    """Create a mapping class whose instances own a ``map_type`` instance.

    The generated class implements the mapping protocol by delegating
    straight to the native map; nothing is buffered or copied. Keys
    whose type is not ``map_type.key_type``, or that cannot be hashed,
    are never "in" the map, and ``get()`` returns the default for them.
    Subscripting with such a key raises ``TypeError``.

    Item assignment depends on ``map_type.value_type``:

    - copy-assignable values are overwritten in place, so an existing
      key keeps its position;
    - copy-constructible-only values are rebuilt: the old entry is
      erased and a new one inserted;
    - otherwise ``__setitem__`` is left out and the class is a
      read-and-delete ``Mapping`` rather than a ``MutableMapping``.

    ``KeyView``, ``ValueView`` and ``ItemView`` subclasses are attached
    to the returned class.

    Args:
        scope: Object the class is bound on as attribute ``name``
            (a module, class or namespace), or None to skip binding.
        name: Class name.
        map_type: A ``NativeMap`` subclass.
        doc: Optional class docstring.

    Returns:
        The generated class.
    """
    if not (isinstance(map_type, type) and issubclass(map_type, NativeMap)):
        raise BindError(
            f"bind_map requires a NativeMap subclass, not {map_type!r}"
        )
    if not name.isidentifier():
        raise BindError(f"Invalid class name: {name!r}")

    key_type = map_type.key_type

    def _check_key(op: str, key: Any) -> None:
        if not isinstance(key, key_type):
            raise TypeError(
                f"{name}.{op}: expected {key_type.__name__} key, "
                f"got {type(key).__name__}"
            )

    def __init__(self) -> None:
        self._native = map_type()

    def __len__(self) -> int:
        return self._native.size()

    def __bool__(self) -> bool:
        return not self._native.empty()

    def _lookup(native: NativeMap, key: object) -> Entry | None:
        # Foreign or unhashable keys are simply absent.
        if not isinstance(key, key_type):
            return None
        try:
            hash(key)
        except TypeError:
            return None
        return native.find(key)

    def __contains__(self, key: object) -> bool:
        return _lookup(self._native, key) is not None

    def get(self, key: object, default: Any = None) -> Any:
        entry = _lookup(self._native, key)
        return default if entry is None else entry.value

    def __iter__(self) -> Iterator[Any]:
        return make_key_iterator(self, self._native)

    def __getitem__(self, key: Any) -> Any:
        _check_key("__getitem__", key)
        entry = self._native.find(key)
        if entry is None:
            raise KeyNotFound(key)
        return entry.value

    def __delitem__(self, key: Any) -> None:
        _check_key("__delitem__", key)
        entry = self._native.find(key)
        if entry is None:
            raise KeyNotFound(key)
        self._native.erase(entry)

    def clear(self) -> None:
        self._native.clear()

    def keys(self) -> views.KeyView:
        return cls.KeyView(self)

    def values(self) -> views.ValueView:
        return cls.ValueView(self)

    def items(self) -> views.ItemView:
        return cls.ItemView(self)

    def __repr__(self) -> str:
        body = ", ".join(
            f"{entry.key!r}: {entry.value!r}" for entry in self._native.begin()
        )
        return f"{name}({{{body}}})"

    namespace: dict[str, Any] = {
        "__slots__": ("_native", "__weakref__"),
        "__doc__": doc,
        "__init__": __init__,
        "__len__": __len__,
        "__bool__": __bool__,
        "__contains__": __contains__,
        "get": get,
        "__iter__": __iter__,
        "__getitem__": __getitem__,
        "__delitem__": __delitem__,
        "clear": clear,
        "keys": keys,
        "values": values,
        "items": items,
        "__repr__": __repr__,
        "map_type": map_type,
    }

    setitem = _setitem_strategy(name, map_type, _check_key)
    if setitem is not None:
        namespace["__setitem__"] = setitem
        base: type = MutableMapping
    else:
        base = Mapping

    if isinstance(scope, types.ModuleType):
        namespace["__module__"] = scope.__name__
    elif isinstance(scope, type):
        namespace["__module__"] = scope.__module__
        namespace["__qualname__"] = f"{scope.__qualname__}.{name}"

    cls = type(name, (base,), namespace)

    for view_base in (views.KeyView, views.ValueView, views.ItemView):
        view = type(
            view_base.__name__,
            (view_base,),
            {
                "__slots__": (),
                "__module__": cls.__module__,
                "__qualname__": f"{cls.__qualname__}.{view_base.__name__}",
            },
        )
        setattr(cls, view_base.__name__, view)

    if scope is not None:
        setattr(scope, name, cls)

    logger.debug(
        "Bound %s over %s as %s", name, map_type.__name__, base.__name__
    )
    return cls


def _setitem_strategy(
    name: str,
    map_type: type[NativeMap],
    check_key: Callable[[str, Any], None],
) -> Callable[[Any, Any, Any], None] | None:
    value_type = map_type.value_type

    def _check_value(value: Any) -> None:
        if not isinstance(value, value_type):
            raise TypeError(
                f"{name}.__setitem__: expected {value_type.__name__} value, "
                f"got {type(value).__name__}"
            )

    if is_copy_assignable(value_type):

        def assign_in_place(self, key: Any, value: Any) -> None:
            check_key("__setitem__", key)
            _check_value(value)
            entry, inserted = self._native.emplace(key, value)
            if not inserted:
                entry.value = value

        assign_in_place.__name__ = "__setitem__"
        assign_in_place.__qualname__ = f"{name}.__setitem__"
        logger.debug("%s: %s is copy-assignable", name, value_type.__name__)
        return assign_in_place

    if is_copy_constructible(value_type):

        def erase_and_reconstruct(self, key: Any, value: Any) -> None:
            check_key("__setitem__", key)
            _check_value(value)
            entry, inserted = self._native.emplace(key, value)
            if not inserted:
                # Existing slot cannot be overwritten; rebuild it.
                self._native.erase(entry)
                self._native.emplace(key, value)

        erase_and_reconstruct.__name__ = "__setitem__"
        erase_and_reconstruct.__qualname__ = f"{name}.__setitem__"
        logger.debug("%s: %s is copy-constructible only", name, value_type.__name__)
        return erase_and_reconstruct

    return None

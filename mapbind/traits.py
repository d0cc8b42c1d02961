"""Value-type capabilities consulted when binding a map.

A bound map assigns into an existing slot when its value type is
copy-assignable, and falls back to erasing and reconstructing the
entry when the type is only copy-constructible. Types opt out of
either capability with class-level markers, the same way a class
opts out of hashing with ``__hash__ = None``::

    class Handle:
        __copy_assignable__ = False
"""

from typing import TypeVar

T = TypeVar("T", bound=type)


def is_copy_constructible(tp: type) -> bool:
    """Whether a stored value of ``tp`` may be constructed from another."""
    if getattr(tp, "__copy_constructible__", True) is False:
        return False
    return getattr(tp, "__copy__", NotImplemented) is not None


def is_copy_assignable(tp: type) -> bool:
    """Whether a stored value of ``tp`` may be overwritten in place."""
    return getattr(tp, "__copy_assignable__", True) is not False


def no_copy_assign(cls: T) -> T:
    """Mark a class as constructible only; slots are rebuilt, never overwritten."""
    cls.__copy_assignable__ = False
    return cls


def no_copy(cls: T) -> T:
    """Mark a class as neither copy-constructible nor copy-assignable."""
    cls.__copy_constructible__ = False
    cls.__copy_assignable__ = False
    return cls


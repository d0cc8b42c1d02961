"""Tests for key/value/item views and their iterators."""

import gc
import weakref

import pytest

from mapbind import (
    ItemIterator,
    KeyIterator,
    ValueIterator,
    bind_map,
    make_key_iterator,
    map_type,
)


@pytest.fixture(params=["ordered", "sorted"])
def Map(request):
    return bind_map(
        None, "Map", map_type(request.param, key_type=str, value_type=int)
    )


def filled(Map, **kwargs):
    m = Map()
    for key, value in kwargs.items():
        m[key] = value
    return m


class TestViewBasic:
    def test_len(self, Map):
        m = filled(Map, a=1, b=2)
        assert len(m.keys()) == 2
        assert len(m.values()) == 2
        assert len(m.items()) == 2

    def test_keys(self, Map):
        assert list(filled(Map, a=1, b=2).keys()) == ["a", "b"]

    def test_values(self, Map):
        assert list(filled(Map, a=1, b=2).values()) == [1, 2]

    def test_items(self, Map):
        assert list(filled(Map, a=1, b=2).items()) == [("a", 1), ("b", 2)]

    def test_items_keys_agree(self, Map):
        m = filled(Map, c=3, a=1, b=2)
        assert [k for k, _ in m.items()] == list(m.keys())
        assert len(set(m.keys())) == len(m)

    def test_keys_in_native_order(self):
        Sorted = bind_map(None, "Sorted", map_type("sorted", key_type=str))
        m = Sorted()
        for key in ("c", "a", "b"):
            m[key] = None
        assert list(m.keys()) == ["a", "b", "c"]
        assert list(m) == ["a", "b", "c"]

    def test_repr(self, Map):
        m = filled(Map, a=1)
        assert repr(m.keys()) == "Map.KeyView(['a'])"
        assert repr(m.items()) == "Map.ItemView([('a', 1)])"


class TestKeyViewContains:
    def test_present(self, Map):
        assert "a" in filled(Map, a=1).keys()

    def test_absent(self, Map):
        assert "z" not in filled(Map, a=1).keys()

    def test_foreign_type(self, Map):
        keys = filled(Map, a=1).keys()
        assert 1 not in keys
        assert [] not in keys
        assert None not in keys

    def test_unhashable_key_of_key_type(self):
        Pairs = bind_map(None, "Pairs", map_type(key_type=tuple))
        m = Pairs()
        m[(1, 2)] = 0
        keys = m.keys()
        assert (1, [2]) not in keys
        assert (1, 2) in keys


class TestViewsAreLive:
    def test_keys_see_insert(self, Map):
        m = filled(Map, a=1)
        keys = m.keys()
        m["b"] = 2
        assert list(keys) == ["a", "b"]
        assert len(keys) == 2

    def test_values_see_overwrite(self, Map):
        m = filled(Map, a=1)
        values = m.values()
        m["a"] = 5
        assert list(values) == [5]

    def test_items_see_delete(self, Map):
        m = filled(Map, a=1, b=2)
        items = m.items()
        del m["a"]
        assert list(items) == [("b", 2)]

    def test_contains_sees_insert(self, Map):
        m = Map()
        keys = m.keys()
        assert "a" not in keys
        m["a"] = 1
        assert "a" in keys

    def test_fresh_view_per_call(self, Map):
        m = Map()
        assert m.keys() is not m.keys()
        assert m.values() is not m.values()
        assert m.items() is not m.items()


class TestIterators:
    def test_flavours(self, Map):
        m = filled(Map, a=1)
        assert isinstance(iter(m), KeyIterator)
        assert isinstance(iter(m.keys()), KeyIterator)
        assert isinstance(iter(m.values()), ValueIterator)
        assert isinstance(iter(m.items()), ItemIterator)

    def test_single_pass(self, Map):
        it = iter(filled(Map, a=1, b=2))
        assert list(it) == ["a", "b"]
        assert list(it) == []

    def test_iter_returns_self(self, Map):
        it = iter(filled(Map, a=1))
        assert iter(it) is it

    def test_independent_iterators(self, Map):
        m = filled(Map, a=1, b=2)
        first, second = iter(m), iter(m)
        assert next(first) == "a"
        assert next(first) == "b"
        assert next(second) == "a"

    def test_new_iterator_sees_current_state(self, Map):
        m = filled(Map, a=1)
        assert list(m) == ["a"]
        m["b"] = 2
        assert list(m) == ["a", "b"]

    def test_overwrite_during_iteration(self, Map):
        m = filled(Map, a=1, b=2)
        for key in m:
            m[key] = 0
        assert list(m.values()) == [0, 0]

    def test_insert_during_iteration_raises(self, Map):
        m = filled(Map, a=1)
        with pytest.raises(RuntimeError):
            for key in m:
                m[key + "x"] = 0

    def test_make_key_iterator_over_native(self, Map):
        m = filled(Map, a=1, b=2)
        assert list(make_key_iterator(m, m._native)) == ["a", "b"]


class TestKeepAlive:
    def test_view_keeps_map_alive(self, Map):
        m = filled(Map, a=1)
        ref = weakref.ref(m)
        keys = m.keys()
        del m
        gc.collect()
        assert ref() is not None
        assert list(keys) == ["a"]

    def test_iterator_keeps_map_alive(self, Map):
        m = filled(Map, a=1, b=2)
        ref = weakref.ref(m)
        it = iter(m.items())
        del m
        gc.collect()
        assert ref() is not None
        assert list(it) == [("a", 1), ("b", 2)]

    def test_map_released_with_views(self, Map):
        m = filled(Map, a=1)
        ref = weakref.ref(m)
        keys = m.keys()
        it = iter(keys)
        del m, keys, it
        gc.collect()
        assert ref() is None

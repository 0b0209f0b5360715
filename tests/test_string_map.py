import pytest

from robutils.errors import (
    InvalidArgumentError,
    NotEnoughSpaceError,
    StringKeyNotFoundError,
)
from robutils.string_map import StringMap


def test_initialize_to_zero():
    smap = StringMap(0)
    assert smap.capacity == 0
    assert len(smap) == 0


def test_default_capacity_is_zero():
    assert StringMap().capacity == 0


def test_negative_capacity_rejected():
    with pytest.raises(InvalidArgumentError):
        StringMap(-1)


def test_init_with_capacity():
    smap = StringMap(10)
    assert smap.capacity == 10
    assert len(smap) == 0


def test_reserve_from_zero():
    smap = StringMap(0)
    smap.reserve(10)
    assert smap.capacity == 10
    assert len(smap) == 0


def test_set_clear_reserve_zero():
    smap = StringMap(10)
    smap.set_no_resize("key1", "value1")
    assert (smap.capacity, len(smap)) == (10, 1)
    smap.set_no_resize("key2", "value2")
    assert (smap.capacity, len(smap)) == (10, 2)
    smap.clear()
    assert (smap.capacity, len(smap)) == (10, 0)
    smap.reserve(0)
    assert (smap.capacity, len(smap)) == (0, 0)


def test_clear_empty():
    smap = StringMap(0)
    smap.clear()
    assert (smap.capacity, len(smap)) == (0, 0)


def test_reserve_then_clear_keeps_capacity():
    smap = StringMap(0)
    smap.reserve(10)
    smap.clear()
    assert (smap.capacity, len(smap)) == (10, 0)


def test_reserve_never_drops_pairs():
    smap = StringMap(4)
    smap.set("a", "1")
    smap.set("b", "2")
    smap.set("c", "3")
    smap.unset("a")
    smap.reserve(0)
    assert smap.capacity == 2
    assert list(smap) == ["b", "c"]
    assert smap.get("c") == "3"


def test_reserve_negative_rejected():
    with pytest.raises(InvalidArgumentError):
        StringMap(1).reserve(-2)


def test_set_no_resize_full():
    smap = StringMap(1)
    smap.set_no_resize("key1", "value1")
    assert (smap.capacity, len(smap)) == (1, 1)
    assert smap.get("key1") == "value1"
    with pytest.raises(NotEnoughSpaceError):
        smap.set_no_resize("key2", "value2")
    assert len(smap) == 1


def test_set_no_resize_overwrite():
    smap = StringMap(2)
    smap.set_no_resize("key1", "value1")
    assert smap.get("key1") == "value1"
    smap.set_no_resize("key1", "val1")
    assert (smap.capacity, len(smap)) == (2, 1)
    assert smap.get("key1") == "val1"
    smap.set_no_resize("key2", "value2")
    assert (smap.capacity, len(smap)) == (2, 2)
    assert smap.get("key2") == "value2"


@pytest.mark.parametrize("key, value", [(None, "value1"), ("key1", None)])
def test_set_no_resize_null_arguments(key, value):
    smap = StringMap(2)
    with pytest.raises(InvalidArgumentError):
        smap.set_no_resize(key, value)


@pytest.mark.parametrize("key, value", [(None, "value1"), ("key1", None)])
def test_set_null_arguments(key, value):
    smap = StringMap(2)
    with pytest.raises(InvalidArgumentError):
        smap.set(key, value)
    assert len(smap) == 0


def test_set_grows_from_zero():
    smap = StringMap(0)
    smap.set("key1", "value1")
    assert (smap.capacity, len(smap)) == (1, 1)
    assert smap.get("key1") == "value1"


def test_set_doubles_capacity():
    smap = StringMap(1)
    smap.set("key1", "value1")
    assert (smap.capacity, len(smap)) == (1, 1)
    smap.set("key2", "value2")
    assert (smap.capacity, len(smap)) == (2, 2)
    assert smap.get("key2") == "value2"
    smap.set("key3", "value3")
    assert (smap.capacity, len(smap)) == (4, 3)
    assert smap.get("key3") == "value3"


def test_set_overwrite_keeps_capacity():
    smap = StringMap(2)
    smap.set("key1", "value1")
    smap.set("key1", "val1")
    assert (smap.capacity, len(smap)) == (2, 1)
    assert smap.get("key1") == "val1"
    smap.set("key2", "value2")
    assert (smap.capacity, len(smap)) == (2, 2)
    assert smap.get("key2") == "value2"


def test_key_exists():
    smap = StringMap(2)
    assert "key1" not in smap
    assert "key2" not in smap
    smap.set("key1", "value1")
    assert "key1" in smap
    assert "key2" not in smap
    smap.unset("key1")
    assert "key1" not in smap
    assert "key2" not in smap


def test_key_exists_none_and_empty():
    assert None not in StringMap(2)
    assert "missing" not in StringMap(0)


def test_key_exists_prefix():
    smap = StringMap(2)
    smap.set("key1", "value1")
    smap.set("key2", "value2")
    assert "key1andsome"[:4] in smap
    assert "key2andsome"[:4] in smap
    assert "key1andsome"[:5] not in smap


def test_unset_fills_gap():
    smap = StringMap(3)
    smap.set_no_resize("key1", "value1")
    smap.set_no_resize("key2", "value2")
    smap.set_no_resize("key3", "value3")
    assert (smap.capacity, len(smap)) == (3, 3)
    assert [smap.get(k) for k in ("key1", "key2", "key3")] == ["value1", "value2", "value3"]
    smap.unset("key2")
    assert (smap.capacity, len(smap)) == (3, 2)
    assert smap.get("key1") == "value1"
    assert smap.get("key3") == "value3"
    smap.set("key3", "value3.1")
    assert (smap.capacity, len(smap)) == (3, 2)
    assert smap.get("key3") == "value3.1"
    smap.set("key2", "value2")
    assert (smap.capacity, len(smap)) == (3, 3)
    assert [smap.get(k) for k in ("key1", "key2", "key3")] == ["value1", "value2", "value3.1"]
    assert list(smap) == ["key1", "key2", "key3"]


def test_unset_null_key():
    with pytest.raises(InvalidArgumentError):
        StringMap(10).unset(None)


def test_unset_on_empty_map():
    with pytest.raises(StringKeyNotFoundError):
        StringMap(0).unset("missing")


def test_unset_missing_key():
    smap = StringMap(2)
    smap.set("key1", "value1")
    smap.set("key2", "value2")
    with pytest.raises(StringKeyNotFoundError):
        smap.unset("missing")
    assert len(smap) == 2


def test_get():
    smap = StringMap(2)
    smap.set("key1", "value1")
    smap.set("key2", "value2")
    assert smap.get("key1") == "value1"
    assert smap.get("key2") == "value2"
    assert smap.get("some_key") is None
    assert smap.get(None) is None


@pytest.mark.parametrize("capacity", [0, 2])
def test_get_on_empty_map(capacity):
    assert StringMap(capacity).get("some_key") is None


def test_get_prefix():
    smap = StringMap(2)
    smap.set("key1", "value1")
    smap.set("key2", "value2")
    assert smap.get("key1andsome"[:4]) == "value1"
    assert smap.get("key2andsome"[:4]) == "value2"


def test_getitem():
    smap = StringMap(1)
    smap.set("key1", "value1")
    assert smap["key1"] == "value1"
    with pytest.raises(KeyError):
        smap["missing"]


@pytest.mark.parametrize("capacity", [4, 2])
def test_get_next_key(capacity):
    smap = StringMap(capacity)
    smap.set("key1", "value1")
    smap.set("key2", "value2")
    first = smap.get_next_key(None)
    assert first == "key1"
    second = smap.get_next_key(first)
    assert second == "key2"
    assert smap.get_next_key(second) is None


def test_get_next_key_empty():
    assert StringMap(0).get_next_key(None) is None


def test_get_next_key_with_gap():
    smap = StringMap(4)
    smap.set("key1", "value1")
    smap.set("key2", "value2")
    smap.set("key3", "value3")
    smap.unset("key2")
    first = smap.get_next_key(None)
    assert first == "key1"
    second = smap.get_next_key(first)
    assert second == "key3"
    assert smap.get_next_key(second) is None
    assert list(smap) == ["key1", "key3"]


def test_get_next_key_unknown_key():
    smap = StringMap(2)
    smap.set("key1", "value1")
    assert smap.get_next_key("nope") is None


def test_copy_into_empty():
    src = StringMap(4)
    src.set("key1", "value1")
    src.set("key2", "value2")
    dst = StringMap(0)
    src.copy_into(dst)
    assert dst.get("key1") == "value1"
    assert dst.get("key2") == "value2"
    assert len(dst) == 2


def test_copy_empty_into_empty():
    dst = StringMap(0)
    StringMap(0).copy_into(dst)
    assert len(dst) == 0


def test_copy_empty_into_non_empty():
    dst = StringMap(4)
    dst.set("key1", "value1")
    dst.set("key2", "value2")
    StringMap(0).copy_into(dst)
    assert dst.get("key1") == "value1"
    assert dst.get("key2") == "value2"


def test_copy_overlapping_keys():
    src = StringMap(0)
    src.set("key1", "value1")
    src.set("key2", "value2")
    dst = StringMap(4)
    dst.set("key2", "value2.1")
    dst.set("key3", "value3")
    src.copy_into(dst)
    assert dst.get("key1") == "value1"
    assert dst.get("key2") == "value2"
    assert dst.get("key3") == "value3"
    assert len(dst) == 3


def test_copy_into_none():
    with pytest.raises(InvalidArgumentError):
        StringMap(0).copy_into(None)


def test_strange_keys():
    smap = StringMap(2)
    smap.set("", "value1")
    smap.set("key with spaces", "value2")
    assert smap.get("") == "value1"
    assert smap.get("key with spaces") == "value2"
import pytest

from burbir.static_list import CAPACITY, StaticList


def test_render_documented_example():
    assert StaticList([1, 20, 30]).render() == "[1,20,30]"


def test_render_empty():
    assert StaticList().render() == "[]"


def test_length_and_items():
    values = [4, 8, 15]
    items = StaticList(values)
    assert len(items) == len(values)
    assert [items[i] for i in range(len(items))] == values


def test_too_many_values():
    with pytest.raises(OverflowError):
        StaticList(range(CAPACITY + 1))


def test_empty_and_full():
    assert StaticList().is_empty()
    full = StaticList(range(CAPACITY))
    assert full.is_full()
    assert not full.is_empty()


def test_index_checks():
    items = StaticList([5, 6])
    assert items.is_index_valid(0)
    assert items.is_index_valid(CAPACITY - 1)
    assert not items.is_index_valid(CAPACITY)
    assert not items.is_index_valid(-1)
    assert items.is_index_effective(1)
    assert not items.is_index_effective(2)


def test_equality():
    assert StaticList([1, 2]) == StaticList([1, 2])
    assert not StaticList([1, 2]) == StaticList([2, 1])
    assert not StaticList([1]) == StaticList([1, 1])


def test_plus_minus_round_trip():
    a = StaticList([3, -2, 9])
    b = StaticList([7, 4, -1])
    assert a.plus_minus(b, True).plus_minus(b, False) == a


def test_plus_minus_self_difference_is_zero():
    a = StaticList([3, -2, 9])
    assert a.plus_minus(a, False) == StaticList([0, 0, 0])


def test_plus_minus_length_mismatch():
    with pytest.raises(ValueError):
        StaticList([1]).plus_minus(StaticList([1, 2]), True)


def test_index_of():
    items = StaticList([7, 3, 7])
    assert items.index_of(7) == 0
    assert items.index_of(3) == 1
    assert items.index_of(99) is None
    assert StaticList().index_of(1) is None


def test_extremes():
    assert StaticList([3, 9, 1]).extremes() == (9, 1)


def test_extremes_empty():
    with pytest.raises(ValueError):
        StaticList().extremes()


def test_inserts():
    items = StaticList([2])
    items.insert_first(1)
    items.insert_last(4)
    items.insert_at(3, 2)
    assert items == StaticList([1, 2, 3, 4])


def test_insert_into_full():
    items = StaticList(range(CAPACITY))
    with pytest.raises(OverflowError):
        items.insert_last(1)


def test_insert_bad_index():
    with pytest.raises(IndexError):
        StaticList([1]).insert_at(5, 3)


def test_deletes():
    items = StaticList([1, 2, 3, 4])
    assert items.delete_first() == 1
    assert items.delete_last() == 4
    assert items.delete_at(1) == 3
    assert items == StaticList([2])


def test_delete_empty():
    with pytest.raises(IndexError):
        StaticList().delete_first()


def test_sort_ascending_and_descending():
    values = [5, -1, 3, 3, 0]
    items = StaticList(values)
    items.sort(True)
    ascending = [items[i] for i in range(len(items))]
    assert all(x <= y for x, y in zip(ascending, ascending[1:]))
    assert sorted(ascending) == sorted(values)
    items.sort(False)
    descending = [items[i] for i in range(len(items))]
    assert all(x >= y for x, y in zip(descending, descending[1:]))


def test_read_skips_invalid_counts():
    items = StaticList.read(["-1", "11", "3", "10", "20", "30"])
    assert items == StaticList([10, 20, 30])


def test_read_zero():
    assert StaticList.read([0]).is_empty()


def test_read_truncated_input():
    with pytest.raises(ValueError):
        StaticList.read([2, 1])
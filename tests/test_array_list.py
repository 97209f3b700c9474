import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.array_list import ArrayList


def test_access_and_delete_sample():
    items = ArrayList()
    for value in (69, 420, 33, 37):
        items.append(value)
    assert list(items) == [69, 420, 33, 37]
    assert items[2] == 33
    del items[1]
    assert list(items) == [69, 33, 37]
    assert len(items) == 3


def test_default_capacity():
    assert ArrayList().capacity() == 10


def test_capacity_doubles_when_full():
    items = ArrayList(2)
    items.append(1)
    items.append(2)
    assert items.capacity() == 2
    items.append(3)
    assert items.capacity() == 4
    assert list(items) == [1, 2, 3]


def test_invalid_capacity():
    with pytest.raises(ValueError):
        ArrayList(0)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_index_out_of_range(index):
    items = ArrayList()
    for value in (1, 2, 3):
        items.append(value)
    with pytest.raises(IndexError):
        items[index]
    with pytest.raises(IndexError):
        del items[index]
    assert list(items) == [1, 2, 3]


def test_first_last_and_pops():
    items = ArrayList()
    for value in (10, 20, 30, 40):
        items.append(value)
    assert items.first() == 10
    assert items.last() == 40
    assert items.pop_first() == 10
    assert items.pop_last() == 40
    assert list(items) == [20, 30]


@pytest.mark.parametrize("method", ["first", "last", "pop_first", "pop_last"])
def test_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(ArrayList(), method)()


@given(st.lists(st.integers()), st.integers(1, 8))
def test_round_trip_and_capacity_bound(values, capacity):
    items = ArrayList(capacity)
    for value in values:
        items.append(value)
    assert list(items) == values
    assert len(items) == len(values)
    assert items.capacity() >= len(items)
    assert items.capacity() % capacity == 0


@given(st.lists(st.integers(), min_size=1))
def test_pop_first_drains_in_order(values):
    items = ArrayList()
    for value in values:
        items.append(value)
    drained = [items.pop_first() for _ in values]
    assert drained == values
    assert len(items) == 0
import pytest
from hypothesis import given
from hypothesis import strategies as st

from minheapq.heap import IntMinHeap


def _filled(values, capacity=100):
    heap = IntMinHeap(capacity)
    for value in values:
        assert heap.insert(value)
    return heap


def test_empty_heap_defaults():
    heap = IntMinHeap(4)
    assert heap.is_empty()
    assert len(heap) == 0
    assert heap.minimum() == 0
    assert heap.extract_min() == 0
    assert str(heap) == "heap size 0:"


def test_insert_tracks_minimum():
    heap = _filled([5, 3, 8])
    assert heap.minimum() == 3
    assert len(heap) == 3
    assert not heap.is_empty()


def test_str_lists_heap_order():
    heap = _filled([5, 3, 8])
    assert str(heap) == "heap size 3: 3, 5, 8"


def test_extract_min_in_ascending_order():
    heap = _filled([9, 4, 7, 1, 6])
    extracted = [heap.extract_min() for _ in range(5)]
    assert extracted == [1, 4, 6, 7, 9]
    assert heap.is_empty()


def test_capacity_limit():
    heap = IntMinHeap(2)
    assert heap.insert(10)
    assert not heap.is_full()
    assert heap.insert(20)
    assert heap.is_full()
    assert heap.insert(5) is False
    assert heap.minimum() == 10
    assert len(heap) == 2


def test_zero_capacity_is_full():
    heap = IntMinHeap(0)
    assert heap.is_full()
    assert heap.insert(1) is False


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        IntMinHeap(-1)


def test_heapsort_largest_first_and_keeps_heap():
    heap = _filled([4, 2, 9, 7])
    before = str(heap)
    assert heap.heapsort() == [9, 7, 4, 2]
    assert str(heap) == before
    assert len(heap) == 4


def test_heapsort_empty():
    assert IntMinHeap(3).heapsort() == []


def test_decrease_key_moves_to_root():
    heap = _filled([10, 20, 30])
    heap.decrease_key(2, 1)
    assert heap.minimum() == 1


def test_decrease_key_ignores_larger_key():
    heap = _filled([10, 20, 30])
    before = str(heap)
    heap.decrease_key(0, 50)
    assert str(heap) == before


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_decrease_key_ignores_bad_index(index):
    heap = _filled([10, 20, 30])
    before = str(heap)
    heap.decrease_key(index, 0)
    assert str(heap) == before


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_extract_all_gives_sorted(values):
    heap = _filled(values)
    extracted = [heap.extract_min() for _ in values]
    assert extracted == sorted(values)
    assert heap.is_empty()


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_heapsort_matches_reverse_sorted(values):
    heap = _filled(values)
    assert heap.heapsort() == sorted(values, reverse=True)
    assert heap.minimum() == (min(values) if values else 0)
import itertools

import pytest

from dsakit.multi_array import MultiArray


def test_default_is_ten_cells():
    arr = MultiArray()
    assert len(arr) == 10
    assert arr.shape == (10,)


def test_size_is_product_of_dimensions():
    arr = MultiArray(2, 3, 4)
    assert len(arr) == 2 * 3 * 4
    assert arr.shape == (2, 3, 4)


def test_flat_index_is_row_major():
    arr = MultiArray(2, 3, 4)
    indexes = [arr.flat_index(*idx) for idx in itertools.product(range(2), range(3), range(4))]
    assert indexes == list(range(len(arr)))


def test_flat_index_errors():
    arr = MultiArray(2, 3)
    with pytest.raises(IndexError):
        arr.flat_index(1)
    with pytest.raises(IndexError):
        arr.flat_index(2, 0)
    with pytest.raises(IndexError):
        arr.flat_index(0, -1)


def test_set_and_get_by_tuple_and_flat():
    arr = MultiArray(2, 3)
    arr[1, 2] = "x"
    assert arr[1, 2] == "x"
    assert arr[arr.flat_index(1, 2)] == "x"
    assert arr.back() == "x"
    arr[0] = "y"
    assert arr[0, 0] == "y"
    assert arr.front() == "y"


def test_flat_index_out_of_range():
    arr = MultiArray(3)
    with pytest.raises(IndexError):
        _ = arr[3]
    with pytest.raises(IndexError):
        arr[-1] = 1
    assert arr.is_empty()
    assert len(arr) == 3


def test_empty_and_full():
    arr = MultiArray(2)
    assert arr.is_empty()
    assert not arr.is_full()
    arr[0] = 1
    assert not arr.is_empty()
    assert not arr.is_full()
    arr[1] = 2
    assert arr.is_full()


def test_shrink_empty_rounds_up():
    arr = MultiArray(5)
    arr.shrink()
    assert len(arr) == 3
    assert arr.shape == (3,)


def test_shrink_keeps_non_empty():
    arr = MultiArray(4)
    arr[0] = 7
    arr.shrink()
    assert len(arr) == 4
    assert arr.front() == 7


def test_bad_dimension_raises():
    with pytest.raises(ValueError):
        MultiArray(3, 0)
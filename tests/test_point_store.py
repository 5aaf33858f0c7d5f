import numpy as np
import pytest

from Nodes.Errors import EmptyRangeError
from Nodes.Point_store import PointStore


def test_handles_are_indices():
    store = PointStore([(1, 2), (3, 4)])
    assert len(store) == 2
    assert list(store.handles()) == [0, 1]
    assert tuple(store[1]) == (3, 4)


def test_dtype_preserved():
    assert PointStore([(1, 2)]).dtype.kind == 'i'
    assert PointStore([(1.5, 2)]).dtype.kind == 'f'
    assert PointStore([(1, 2)], dtype=float).dtype.kind == 'f'


def test_invalid_handle():
    store = PointStore([(1, 2)])
    with pytest.raises(IndexError):
        store.point(1)
    with pytest.raises(IndexError):
        store.point(-1)


def test_array_is_read_only():
    store = PointStore([(1, 2), (3, 4)])
    with pytest.raises(ValueError):
        store.array[0, 0] = 7
    assert tuple(store[0]) == (1, 2)


def test_caller_array_is_copied():
    data = np.array([[1.0, 2.0], [3.0, 4.0]])
    store = PointStore(data)
    data[0, 0] = 99.0
    assert store[0][0] == 1.0
    assert data.flags.writeable


def test_append_keeps_existing_handles():
    store = PointStore([(1, 2)])
    handle = store.append((5, 6))
    assert handle == 1
    assert tuple(store[0]) == (1, 2)
    assert tuple(store[1]) == (5, 6)
    assert not store.array.flags.writeable


def test_append_to_empty_store():
    store = PointStore()
    assert len(store) == 0
    assert store.append((0.5, 0.25)) == 0
    assert tuple(store[0]) == (0.5, 0.25)


@pytest.mark.parametrize("points", [[1, 2, 3], [(1, 2, 3)], [[[1, 2]]]])
def test_rejects_non_2d_points(points):
    with pytest.raises(ValueError):
        PointStore(points)


def test_append_rejects_bad_point():
    with pytest.raises(ValueError):
        PointStore().append((1, 2, 3))


def test_bounding_box():
    store = PointStore([(1, 2), (5, 7), (3, 0)])
    assert store.bounding_box() == ((1, 0), (5, 7))


def test_bounding_box_empty():
    with pytest.raises(EmptyRangeError):
        PointStore([]).bounding_box()


def test_wrap():
    store = PointStore([(1, 2)])
    assert PointStore.wrap(store) is store
    assert isinstance(PointStore.wrap([(1, 2)]), PointStore)


def test_many_appends_keep_handles_and_stay_read_only():
    store = PointStore([(0, 0)])
    handles = [store.append((i, -i)) for i in range(1, 1000)]
    assert handles == list(range(1, 1000))
    assert len(store) == 1000
    assert store.array.shape == (1000, 2)
    assert tuple(store[0]) == (0, 0)
    assert tuple(store[999]) == (999, -999)
    assert not store.array.flags.writeable
    with pytest.raises(ValueError):
        store[5][0] = 1
    with pytest.raises(IndexError):
        store.point(1000)


def test_buffer_grows_by_doubling():
    store = PointStore()
    store.append((1.0, 1.0))
    capacity = len(store._buf)
    for _ in range(capacity - 1):
        store.append((2.0, 2.0))
    assert len(store._buf) == capacity
    store.append((3.0, 3.0))
    assert len(store._buf) == 2 * capacity
    assert store.bounding_box() == ((1.0, 1.0), (3.0, 3.0))

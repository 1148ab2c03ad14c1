import numpy as np
import pytest

from vectools import Vector


def test_explicit_components():
    v = Vector(1, 2, 3)
    assert v.to_array() == [1, 2, 3]
    assert v.size() == 3
    assert len(v) == 3


def test_empty_vector():
    v = Vector()
    assert v.size() == 0
    assert v.to_array() == []
    assert v.x() is None


def test_from_array_matches_constructor():
    assert Vector.from_array([4, 5, 6]).to_array() == Vector(4, 5, 6).to_array()
    assert Vector.from_array((4, 5)).size() == 2
    assert Vector.from_array(n for n in range(3)).to_array() == [0, 1, 2]


def test_from_numpy_array():
    v = Vector.from_array(np.array([1.5, 2.5]))
    assert v.to_array() == [1.5, 2.5]
    # numpy scalars are unwrapped into Python numbers
    assert type(v.x()) is float

    with pytest.raises(ValueError):
        Vector.from_array(np.zeros((2, 2)))


def test_repeated():
    assert Vector.repeated(7, 4).to_array() == [7, 7, 7, 7]
    assert Vector.repeated(7, 0).size() == 0


def test_origin():
    assert Vector.origin().to_array() == [0, 0, 0]
    assert Vector.origin(2).to_array() == [0, 0]
    assert Vector.origin(np.int64(5)).size() == 5


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Vector.repeated(1, -1)
    with pytest.raises(ValueError):
        Vector.origin(-3)
    with pytest.raises(TypeError):
        Vector.repeated(1, 2.5)
    with pytest.raises(TypeError):
        Vector.origin(True)


def test_invalid_components():
    with pytest.raises(TypeError):
        Vector("a", 1)
    with pytest.raises(TypeError):
        Vector(1 + 2j)
    with pytest.raises(TypeError):
        Vector.from_array([1, None])


def test_to_array_is_a_copy():
    v = Vector(1, 2, 3)
    arr = v.to_array()
    arr[0] = 100
    arr.append(4)
    assert v.to_array() == [1, 2, 3]


def test_to_numpy():
    v = Vector(1, 2, 3)
    arr = v.to_numpy()
    assert arr.dtype == np.float64
    assert np.allclose(arr, [1.0, 2.0, 3.0])
    arr[0] = 100.0
    assert v.x() == 1


def test_axis_accessors():
    v = Vector(1, 2, 3)
    assert (v.x(), v.y(), v.z()) == (1, 2, 3)
    assert (v.i(), v.j(), v.k()) == (1, 2, 3)

    short = Vector(9)
    assert short.x() == 9
    assert short.y() is None
    assert short.k() is None


def test_nth():
    v = Vector(10, 20, 30)
    assert v.nth(0) == 10
    assert v.nth(2) == 30
    assert v.nth(3) is None
    # nth does not wrap around
    assert v.nth(-1) is None
    assert Vector.origin(2).nth(5) is None


def test_at():
    v = Vector(10, 20, 30)
    assert v.at(1) == 20
    assert v.at(-1) == 30
    assert v.at(-3) == 10
    assert v.at(-4) is None
    assert v.at(3) is None
    assert Vector.origin(2).at(-1) == 0


def test_index_must_be_integer():
    v = Vector(1, 2)
    with pytest.raises(TypeError):
        v.nth(0.5)
    with pytest.raises(TypeError):
        v.at("0")
    assert v.nth(np.int32(1)) == 2


def test_repr_and_iter():
    v = Vector(1, 2.5)
    assert repr(v) == "Vector(1, 2.5)"
    assert repr(Vector()) == "Vector()"
    assert list(v) == [1, 2.5]

from .utils import get_test_seeds, init_seed, rand_vector3, rand_matrice3, allclose
from mathlib import (
    Vector2, Vector3, Matrice3, angle_type_of,
    ComponentIndexError, InvalidArgumentError, InvalidLengthError,
    ZeroMagnitudeError,
)
import math
import torch
import pytest

seeds = get_test_seeds()


def test_construct():
    v = Vector3()
    assert (v.x, v.y, v.z) == (0, 0, 0), "default"
    v = Vector3(1, 2, 3)
    assert (v.x, v.y, v.z) == (1, 2, 3), "components"
    assert v.tolist() == [1, 2, 3], "tolist"
    x, y, z = v
    assert (x, y, z) == (1, 2, 3), "unpack"
    assert len(v) == 3
    assert repr(v) == 'Vector3(1.0, 2.0, 3.0)'


def test_single_precision():
    v = Vector3(0.1, 0, 0)
    assert v.x == torch.tensor(0.1, dtype=torch.float32).item()
    assert v.x != 0.1


def test_from_array():
    assert Vector3.from_array([1, 2, 3]) == Vector3(1, 2, 3), "list"
    assert Vector3.from_array((1., 2., 3.)) == Vector3(1, 2, 3), "tuple"
    with pytest.raises(InvalidLengthError):
        Vector3.from_array([1, 2])
    with pytest.raises(InvalidLengthError):
        Vector3.from_array([1, 2, 3, 4])
    with pytest.raises(ValueError):
        Vector3.from_array([[1, 2, 3]])


def test_from_array_copies():
    t = torch.tensor([1., 2., 3.])
    v = Vector3.from_array(t)
    t[0] = 10
    assert v.x == 1
    v[1] = 20
    assert t[1] == 2


def test_from_vector():
    assert Vector3.from_vector(Vector2(1, 2)) == Vector3(1, 2, 0), "from 2d"
    a = Vector3(1, 2, 3)
    b = Vector3.from_vector(a)
    assert a == b and a is not b, "copy"
    b.z = 5
    assert a.z == 3, "deep copy"
    with pytest.raises(InvalidArgumentError):
        Vector3.from_vector(None)
    with pytest.raises(TypeError):
        Vector3.from_vector([1, 2, 3])


def test_indexer():
    v = Vector3(1, 2, 3)
    assert [v[0], v[1], v[2]] == [1, 2, 3]
    v[0], v[1], v[2] = 4, 5, 6
    assert v == Vector3(4, 5, 6)
    for index in (3, -1, 10):
        with pytest.raises(ComponentIndexError):
            v[index]
        with pytest.raises(IndexError):
            v[index] = 0


def test_properties():
    v = Vector3()
    v.x, v.y, v.z = 1, 2, 3
    assert v == Vector3(1, 2, 3)


def test_magnitude():
    v = Vector3(3, 4, 0)
    assert v.magnitude == 5.0
    assert Vector3.length(v) == 5.0
    assert allclose(v.normalized, Vector3(0.6, 0.8, 0.0))
    assert allclose(Vector3.normalize(v), [0.6, 0.8, 0.0])
    assert Vector3(0, 0, 7).normalized == Vector3(0, 0, 1)
    with pytest.raises(ZeroMagnitudeError):
        Vector3().normalized
    with pytest.raises(ZeroDivisionError):
        Vector3.normalize(Vector3())


def test_dot():
    a, b = Vector3(1, 2, 3), Vector3(4, -5, 6)
    assert Vector3.dot(a, b) == 12
    assert a.dot(b) == 12
    assert Vector3.dot(a) == 14, "squared magnitude"
    assert Vector3.dot_components(1, 2, 2) == 9
    with pytest.raises(InvalidLengthError):
        Vector3.dot_components(1, 2)


@pytest.mark.parametrize("seed", seeds)
def test_dot_properties(seed):
    g = init_seed(seed)
    a, b = rand_vector3(g), rand_vector3(g)
    assert Vector3.dot(a, b) == Vector3.dot(b, a), "commutative"
    assert Vector3.dot(a) == pytest.approx(a.magnitude ** 2, rel=1e-5), "magnitude"
    assert Vector3.dot(a) == Vector3.dot_components(*a), "components"


@pytest.mark.parametrize("seed", seeds)
def test_cross(seed):
    g = init_seed(seed)
    a, b = rand_vector3(g), rand_vector3(g)
    assert Vector3.cross(a, b) == -Vector3.cross(b, a), "anticommutative"
    native = torch.linalg.cross(a.as_tensor(), b.as_tensor())
    assert allclose(a.cross(b), native, atol=1e-6)
    c = a.cross(b)
    assert abs(c.dot(a)) < 1e-5 and abs(c.dot(b)) < 1e-5, "orthogonal"


def test_cross_basis():
    assert Vector3.cross(Vector3.right(), Vector3.up()) == Vector3.forward()
    assert Vector3.cross(Vector3.up(), Vector3.right()) == Vector3.backward()
    assert Vector3.cross(Vector3.forward(), Vector3.right()) == Vector3.up()
    assert Vector3.left() == -Vector3.right()
    assert Vector3.down() == -Vector3.up()
    assert Vector3.one() == Vector3(1, 1, 1)
    assert Vector3.zero() == Vector3()


def test_sqrt_dot():
    a = Vector3(1, 2, 2)
    assert Vector3.sqrt_dot(a, a) == 3.0, "same vector"
    assert Vector3.sqrt_dot(Vector3(1, 0, 0), Vector3(4, 1, 0)) == 2.0
    with pytest.warns(RuntimeWarning):
        out = Vector3.sqrt_dot(Vector3(1, 0, 0), Vector3(-1, 0, 0))
    assert math.isnan(out)


def test_distance():
    a, b = Vector3(1, 1, 1), Vector3(4, 5, 1)
    assert Vector3.distance(a, b) == 5.0
    assert a.distance(b) == 5.0
    assert b.distance(a) == 5.0
    assert a.distance(a) == 0.0


@pytest.mark.parametrize("seed", seeds)
def test_direction(seed):
    assert Vector3.direction(Vector3(1, 2, 3), Vector3(4, 6, 3)) == Vector3(3, 4, 0)
    g = init_seed(seed)
    a, b = rand_vector3(g), rand_vector3(g)
    assert Vector3.direction(a, b) == -Vector3.direction(b, a)
    assert Vector3.direction(a, b).magnitude == pytest.approx(a.distance(b), rel=1e-5)


def test_cosine_between():
    x, y = Vector3(1, 0, 0), Vector3(0, 1, 0)
    assert Vector3.cosine_between(x, y) == 0.0
    assert Vector3.cosine_between(x, Vector3(2, 0, 0)) == 1.0
    assert Vector3.cosine_between(x, Vector3(-3, 0, 0)) == -1.0
    assert x.cosine_between(Vector3(1, 1, 0)) == pytest.approx(math.sqrt(0.5))
    with pytest.raises(ZeroMagnitudeError):
        Vector3.cosine_between(x, Vector3())


def test_angle_type():
    x = Vector3(1, 0, 0)
    assert Vector3.angle_type(x, Vector3(0, 1, 0)) == 0, "right"
    assert Vector3.angle_type(x, Vector3(1, 1, 0)) == 1, "acute"
    assert Vector3.angle_type(x, Vector3(-1, 1, 0)) == -1, "obtuse"
    assert Vector3.angle_type_of(0.) == 0
    assert Vector3.angle_type_of(-0.3) == -1
    assert angle_type_of(0.2) == 1
    assert angle_type_of(1e-7) == 1, "exact by default"
    assert angle_type_of(1e-7, tol=1e-6) == 0
    assert angle_type_of(-1e-7, tol=1e-6) == 0


def test_project_reject():
    a, b = Vector3(2, 3, 4), Vector3(1, 0, 0)
    assert Vector3.project(a, b) == Vector3(2, 0, 0)
    assert Vector3.reject(a, b) == Vector3(0, 3, 4)
    assert Vector3.project(a, Vector3(5, 0, 0)) == Vector3(2, 0, 0), "scale"
    with pytest.raises(ZeroMagnitudeError):
        Vector3.project(a, Vector3())
    with pytest.raises(ZeroMagnitudeError):
        Vector3.reject(a, Vector3())


@pytest.mark.parametrize("seed", seeds)
def test_project_reject_decomposition(seed):
    g = init_seed(seed)
    a, b = rand_vector3(g), rand_vector3(g)
    p, r = a.project(b), a.reject(b)
    assert allclose(p + r, a, atol=1e-6), "sum"
    assert abs(r.dot(b)) < 1e-5, "orthogonal"
    assert allclose(p.cross(b), Vector3(), atol=1e-5), "parallel"


def test_operators():
    a, b = Vector3(1, 2, 3), Vector3(4, 5, 6)
    assert a + b == Vector3(5, 7, 9)
    assert b - a == Vector3(3, 3, 3)
    assert -a == Vector3(-1, -2, -3)
    assert a * 2 == Vector3(2, 4, 6)
    assert 2 * a == Vector3(2, 4, 6)
    assert a / 2 == Vector3(0.5, 1, 1.5)
    assert a == Vector3(1, 2, 3), "operands are unchanged"
    with pytest.raises(ZeroDivisionError):
        a / 0
    with pytest.raises(TypeError):
        a + Vector2(1, 2)
    with pytest.raises(TypeError):
        a * a


def test_equality():
    assert Vector3(1, 2, 3) == Vector3(1, 2, 3)
    assert Vector3(1, 2, 3) != Vector3(1, 2, 4)
    assert not (Vector3(1, 2, 3) != Vector3(1, 2, 3))
    assert Vector3(1, 2, 0) != Vector2(1, 2), "different types"
    assert Vector3(0, 0, 0) == Vector3(-0., 0, 0)
    assert Vector3(0.1, 0, 0) != Vector3(0.1 + 1e-6, 0, 0), "exact"
    with pytest.raises(TypeError):
        hash(Vector3())


@pytest.mark.parametrize("seed", seeds)
def test_matrix_vector(seed):
    m = Matrice3(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert m * Vector3(1, 0, -1) == Vector3(-2, -2, -2)
    g = init_seed(seed)
    m, v = rand_matrice3(g), rand_vector3(g)
    native = torch.matmul(m.as_tensor(), v.as_tensor())
    assert isinstance(m * v, Vector3)
    assert allclose(m * v, native, atol=1e-6)
    assert m @ v == m * v
    with pytest.raises(TypeError):
        v * m


def test_from_array_invalid():
    with pytest.raises(InvalidArgumentError):
        Vector3.from_array(None)
    with pytest.raises(InvalidArgumentError):
        Vector3.from_array(['a', 'b', 'c'])
    with pytest.raises(InvalidArgumentError):
        Vector3.from_array([1, None, 3])


def test_nan_equality():
    nan = float('nan')
    v = Vector3(nan, 0, 0)
    assert v == v
    assert v == Vector3(nan, 0, 0)
    assert not (v != Vector3(nan, 0, 0))
    assert v != Vector3(0, 0, 0)


def test_mixed_dimensions():
    a, b = Vector3(1, 2, 3), Vector2(1, 2)
    for fn in (Vector3.dot, Vector3.cross, Vector3.sqrt_dot,
               Vector3.distance, Vector3.direction, Vector3.cosine_between,
               Vector3.angle_type, Vector3.project, Vector3.reject):
        with pytest.raises(InvalidArgumentError):
            fn(a, b)
    with pytest.raises(InvalidArgumentError):
        Vector2.cross(b, a)

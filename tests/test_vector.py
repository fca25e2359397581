from biot_savart_segments import Vector, Location, dot, cross, sub

import numpy as np

import pytest


def test_polar():
    assert Vector.from_polar(1, 0, 0) == Vector(1, 0, 0)
    np.testing.assert_allclose(Vector.from_polar(1, np.pi/4, np.pi/6).as_array(),
                               [np.sqrt(6)/4, np.sqrt(6)/4, 0.5], atol=1e-5)


@pytest.mark.parametrize('amplitude, phi, theta', [
    (1, 0, 0),
    (3.7, 1.2, -0.4),
    (-2.5, 7.1, 2.9),
    (1e3, -np.pi, np.pi/2),
    (0, 0.3, 0.3),
])
def test_polar_amplitude(amplitude, phi, theta):
    np.testing.assert_allclose(Vector.from_polar(amplitude, phi, theta).abs(),
                               abs(amplitude), atol=1e-5)


def test_abs():
    v = Vector(3, 4, 12)
    assert v.abs() == 13
    assert abs(v) == 13


def test_add():
    assert Vector(1, 2, 3) + Vector(1, 1, 1) == Vector(2, 3, 4)
    assert Vector(1, 2, 3).add(Vector(1, 1, 1)) == Vector(2, 3, 4)


def test_accumulate():
    v1 = Vector(1, 1, 1)
    v2 = Vector(10, 20, 30)
    assert v1.accumulate(v2) == Vector(11, 21, 31)
    v1 += v2
    assert v1 == Vector(11, 21, 31)


def test_add_commutative_associative():
    rng = np.random.default_rng(1234)
    a, b, c = (Vector(*rng.normal(scale=100, size=3)) for _ in range(3))
    assert a + b == b + a
    np.testing.assert_allclose(((a + b) + c).as_array(), (a + (b + c)).as_array(),
                               rtol=1e-12)
    assert a.accumulate(b) == a.add(b)


def test_vector_ops():
    x, y = Vector(1, 0, 0), Vector(0, 1, 0)
    assert dot(x, y) == 0
    assert cross(x, y) == Vector(0, 0, 1)
    assert sub(Vector(5, 5, 5), Vector(1, 2, 3)) == Vector(4, 3, 2)
    assert Vector(1, -2, 3).scaled(2) == Vector(2, -4, 6)


def test_finite():
    assert Vector(1, 2, 3).is_finite()
    assert not Vector(np.nan, 0, 0).is_finite()
    assert not Vector(0, np.inf, 0).is_finite()


def test_location_not_summable():
    with pytest.raises(TypeError):
        Location(0, 0, 0) + Vector(1, 1, 1)
    with pytest.raises(TypeError):
        Vector(1, 1, 1) + Location(0, 0, 0)
    with pytest.raises(TypeError):
        Vector(1, 1, 1).add(Location(0, 0, 0))


def test_displacement():
    assert Location(1, 2, 3).displacement_to(Location(0, 0, 0)) == Vector(-1, -2, -3)


def test_immutable():
    v = Vector(1, 2, 3)
    with pytest.raises(AttributeError):
        v.x = 5

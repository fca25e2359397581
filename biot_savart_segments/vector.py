"""Small immutable 3D value types

:class:`Vector` is a free vector (a segment axis, a field value or a
displacement), :class:`Location` is a point in space. The two are not
summable with each other; the only arithmetic between locations is the
displacement :meth:`Location.displacement_to`.
"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vector:
    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def zero(cls):
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_polar(cls, amplitude, phi, theta):
        """Build a vector from an amplitude and two angles

        Parameters
        ----------
        amplitude : float
            length of the vector, a negative amplitude flips it
        phi : float
            azimuth in the X-Y plane, measured from the X axis
        theta : float
            elevation measured from the X-Y plane towards the Z axis

        No range restriction is put on the angles.
        """
        x = amplitude * np.cos(theta) * np.cos(phi)
        y = amplitude * np.cos(theta) * np.sin(phi)
        z = amplitude * np.sin(theta)
        return cls(x, y, z)

    def abs(self):
        """Euclidean norm"""
        return float(np.sqrt(self.x**2 + self.y**2 + self.z**2))

    def __abs__(self):
        return self.abs()

    def add(self, other):
        """Component-wise sum, returned as a new vector"""
        if not isinstance(other, Vector):
            raise TypeError('cannot add {!r} to a Vector'.format(other))
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def accumulate(self, other):
        """Running-sum form of :meth:`add`

        Vectors are immutable, so the accumulated value is returned and the
        caller rebinds it, ``total = total.accumulate(v)``, exactly like
        ``total += v``.
        """
        return self.add(other)

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def scaled(self, factor):
        return Vector(factor * self.x, factor * self.y, factor * self.z)

    def is_finite(self):
        return bool(np.all(np.isfinite(self.as_array())))

    def as_array(self):
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class Location:
    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    def displacement_to(self, point):
        """Vector pointing from this location to `point`"""
        return Vector(point.x - self.x, point.y - self.y, point.z - self.z)

    def is_finite(self):
        return bool(np.all(np.isfinite(self.as_array())))

    def as_array(self):
        return np.array([self.x, self.y, self.z], dtype=float)


def dot(a, b):
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a, b):
    return Vector(a.y * b.z - a.z * b.y,
                  a.z * b.x - a.x * b.z,
                  a.x * b.y - a.y * b.x)


def sub(a, b):
    """Component-wise difference a - b of two vectors"""
    return a.add(b.scaled(-1.0))

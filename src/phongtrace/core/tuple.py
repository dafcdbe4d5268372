"""Homogeneous 3-D tuples for points and vectors.

A Tuple carries a fourth ``w`` component that tags what it is: ``w == 1`` is a
point, ``w == 0`` is a vector. The arithmetic operators keep the tag
consistent, so subtracting two points yields a vector and moving a point by a
vector yields a point.

Example:
    >>> from src.phongtrace.core.tuple import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> (p + v * 2.0).z
    5.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance used for approximate comparisons of floating-point results
EPSILON = 1e-5


class DegenerateVectorError(ValueError):
    """Raised when normalizing a tuple whose magnitude is zero."""


@dataclass(frozen=True)
class Tuple:
    """A point or vector in homogeneous coordinates.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def to_vector(self) -> Tuple:
        """Return a copy with ``w`` forced to 0.

        Used to turn a transformed normal back into a direction after an
        inverse-transpose multiply has left a stray ``w``.
        """
        return Tuple(self.x, self.y, self.z, 0.0)

    def __add__(self, other: Tuple) -> Tuple:
        if self.is_point() and other.is_point():
            raise TypeError("Cannot add two points")
        return Tuple(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Tuple) -> Tuple:
        return Tuple(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Tuple:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Tuple:
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def magnitude(self) -> float:
        """Euclidean length over all four components."""
        return math.sqrt(
            self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
        )

    def normalize(self) -> Tuple:
        """Scale the tuple to unit magnitude.

        Returns:
            A tuple in the same direction with magnitude 1.

        Raises:
            DegenerateVectorError: If the magnitude is zero.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise DegenerateVectorError(f"Cannot normalize zero-magnitude {self!r}")
        return self / mag

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Tuple) -> Tuple:
        """Cross product of the xyz parts; the result is always a vector."""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def approx_eq(self, other: Tuple, epsilon: float = EPSILON) -> bool:
        """Check component-wise equality within ``epsilon``."""
        return (
            abs(self.x - other.x) < epsilon
            and abs(self.y - other.y) < epsilon
            and abs(self.z - other.z) < epsilon
            and abs(self.w - other.w) < epsilon
        )


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (``w == 1``)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (``w == 0``)."""
    return Tuple(float(x), float(y), float(z), 0.0)


def reflect(in_vector: Tuple, normal: Tuple) -> Tuple:
    """Reflect a vector about a surface normal.

    Args:
        in_vector: The incoming direction (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction ``in - normal * 2 * dot(in, normal)``.
    """
    return in_vector - normal * 2.0 * in_vector.dot(normal)

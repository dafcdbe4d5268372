"""Unit sphere primitive.

The sphere is centered at the local origin with radius 1; position and size
come entirely from its transform.

Example:
    >>> from src.phongtrace.core.matrix import scaling
    >>> from src.phongtrace.core.ray import Ray
    >>> from src.phongtrace.core.tuple import point, vector
    >>> s = sphere().with_transform(scaling(2.0, 2.0, 2.0))
    >>> ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    >>> sorted(i.t for i in s.intersect(ray))
    [3.0, 7.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.phongtrace.core.matrix import Matrix
from src.phongtrace.core.ray import Ray
from src.phongtrace.core.tuple import Tuple, point
from src.phongtrace.geometry.shape import Shape
from src.phongtrace.materials.phong import Material
from src.phongtrace.scene.intersection import Intersection

ORIGIN = point(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Sphere(Shape):
    """A unit sphere at the local origin."""

    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        """Solve ``|O + tD|^2 = 1`` for t.

        Expanding gives ``a*t^2 + b*t + c = 0`` with:
            a = D . D
            b = 2 * (D . (O - center))
            c = (O - center) . (O - center) - 1

        A negative discriminant is a miss, and so is a zero-length direction.
        Otherwise both roots are returned, including the doubled root of a
        tangent ray.
        """
        sphere_to_ray = local_ray.origin - ORIGIN
        a = local_ray.direction.dot(local_ray.direction)
        if a == 0.0:
            return []
        b = 2.0 * local_ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        return [
            Intersection((-b - sqrt_d) / (2.0 * a), self),
            Intersection((-b + sqrt_d) / (2.0 * a), self),
        ]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        return local_point - ORIGIN


def sphere(material: Material | None = None) -> Sphere:
    """Create a unit sphere with identity transform.

    Args:
        material: Optional material; defaults to ``Material()``.
    """
    if material is None:
        return Sphere()
    return Sphere(material=material)


def with_transform(shape: Shape, matrix: Matrix) -> Shape:
    return shape.with_transform(matrix)


def with_material(shape: Shape, material: Material) -> Shape:
    return shape.with_material(material)


def normal_at(shape: Shape, world_point: Tuple) -> Tuple:
    return shape.normal_at(world_point)

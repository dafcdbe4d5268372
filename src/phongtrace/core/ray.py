"""Ray data structure.

A ray is a parametric half-line ``origin + t * direction``. Rays are
intersected against shapes by transforming the ray into the shape's local
space instead of transforming the shape.

Example:
    >>> from src.phongtrace.core.ray import Ray
    >>> from src.phongtrace.core.tuple import point, vector
    >>> ray = Ray(origin=point(2.0, 3.0, 4.0), direction=vector(1.0, 0.0, 0.0))
    >>> ray.position_at(2.5)
    Tuple(x=4.5, y=3.0, z=4.0, w=1.0)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.phongtrace.core.matrix import Matrix
from src.phongtrace.core.tuple import Tuple


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be
            normalized; transformed rays generally are not.
    """

    origin: Tuple
    direction: Tuple

    def position_at(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point ``origin + direction * t``.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with origin and direction multiplied by ``matrix``.

        The direction keeps ``w == 0`` because every transform builder has a
        bottom row of ``[0, 0, 0, 1]``.
        """
        return Ray(origin=matrix @ self.origin, direction=matrix @ self.direction)

"""Ray-shape intersection records and nearest-hit resolution.

``intersect`` produces the candidate intersections of one ray with one
shape. ``hit`` picks the visible one: the intersection with the smallest
strictly positive ``t``. Intersections at or behind the ray origin are never
visible.

Example:
    >>> from src.phongtrace.core.ray import Ray
    >>> from src.phongtrace.core.tuple import point, vector
    >>> from src.phongtrace.geometry.sphere import sphere
    >>> ray = Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
    >>> hit(intersect(ray, sphere())).t
    4.0
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING

from src.phongtrace.core.ray import Ray

if TYPE_CHECKING:
    from src.phongtrace.geometry.shape import Shape

_by_t = attrgetter("t")


@dataclass(frozen=True)
class Intersection:
    """A ray parameter paired with the shape struck there.

    Attributes:
        t: Ray parameter of the intersection. Negative values lie behind
            the ray origin.
        object: The (untransformed) shape that was hit.
    """

    t: float
    object: Shape


def intersect(ray: Ray, shape: Shape) -> list[Intersection]:
    """Intersect a world-space ray with a shape.

    Args:
        ray: The ray in world space.
        shape: The shape to test.

    Returns:
        The candidate intersections in no particular order. Empty on a miss.

    Raises:
        NonInvertibleMatrixError: If the shape's transform is singular.
    """
    return shape.intersect(ray)


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list sorted by ascending ``t``."""
    return sorted(xs, key=_by_t)


def intersect_world(ray: Ray, shapes: Iterable[Shape]) -> list[Intersection]:
    """Intersect a ray with several shapes.

    Args:
        ray: The ray in world space.
        shapes: Shapes to test.

    Returns:
        All intersections merged into one list sorted by ascending ``t``.
    """
    per_shape = [sorted(shape.intersect(ray), key=_by_t) for shape in shapes]
    return list(heapq.merge(*per_shape, key=_by_t))


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Args:
        xs: Candidate intersections in any order.

    Returns:
        The intersection with the smallest ``t > 0``, or None if there is
        none. Among equal ``t`` values the first encountered wins.
    """
    return min((i for i in xs if i.t > 0.0), key=_by_t, default=None)

"""Scene module for intersections and lights.

Components:
    intersection: Intersection records, intersect, and hit selection
    light: Point light source
"""

from .intersection import Intersection, hit, intersect, intersect_world, intersections
from .light import PointLight

__all__ = [
    "Intersection",
    "intersect",
    "intersections",
    "intersect_world",
    "hit",
    "PointLight",
]

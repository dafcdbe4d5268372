"""Geometry module for shape primitives.

Components:
    shape: Abstract Shape with transform-aware intersect and normal_at
    sphere: Unit sphere primitive

A new primitive subclasses Shape and implements only local_intersect and
local_normal_at; world/local space conversion is shared.
"""

from .shape import Shape
from .sphere import Sphere, normal_at, sphere, with_material, with_transform

__all__ = [
    "Shape",
    "Sphere",
    "sphere",
    "with_transform",
    "with_material",
    "normal_at",
]

"""Core math module.

Components:
    tuple: Homogeneous points and vectors
    matrix: 4x4 matrices, determinants, inverses and transform builders
    ray: Ray data structure and ray transformation
    color: Unbounded RGB colors
    render: One-ray-per-pixel render driver
"""

from .color import BLACK, WHITE, Color
from .matrix import (
    Matrix,
    NonInvertibleMatrixError,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from .ray import Ray
from .tuple import EPSILON, DegenerateVectorError, Tuple, point, reflect, vector

# Note: render is NOT imported here to avoid circular imports.
# Import directly from src.phongtrace.core.render when needed.

__all__ = [
    "Tuple",
    "point",
    "vector",
    "reflect",
    "EPSILON",
    "DegenerateVectorError",
    "Matrix",
    "NonInvertibleMatrixError",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "Ray",
    "Color",
    "BLACK",
    "WHITE",
]

"""Materials module.

Components:
    phong: Phong material parameters and the lighting function
"""

from .phong import Material, lighting

__all__ = [
    "Material",
    "lighting",
]

"""Abstract shape with transform-aware intersection and normals.

Every shape is defined in its own local space and carries an own-to-world
transform. The generic entry points here do the space conversions; concrete
shapes only implement ``local_intersect`` and ``local_normal_at``:

    world ray --inverse(transform)--> local ray --local_intersect--> t values
    world point --inverse(transform)--> local point --local_normal_at-->
        local normal --transpose(inverse(transform))--> world normal

Normals are mapped with the inverse-transpose because a non-uniform scale
does not keep normals perpendicular under the forward transform.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.phongtrace.core.matrix import Matrix, identity
from src.phongtrace.core.ray import Ray
from src.phongtrace.core.tuple import Tuple
from src.phongtrace.materials.phong import Material

if TYPE_CHECKING:
    from src.phongtrace.scene.intersection import Intersection


@dataclass(frozen=True)
class Shape(ABC):
    """Base class for transformable primitives.

    Shapes are immutable values compared by transform and material.
    ``with_transform`` and ``with_material`` return new shapes.

    Attributes:
        transform: Own-to-world transform matrix.
        material: Surface material used for shading.
    """

    transform: Matrix = field(default_factory=identity)
    material: Material = field(default_factory=Material)

    def with_transform(self, matrix: Matrix) -> Shape:
        """Compose ``matrix`` onto the current transform.

        The new transform is ``transform @ matrix``, so ``matrix`` acts first
        in object space.
        """
        return dataclasses.replace(self, transform=self.transform @ matrix)

    def with_material(self, material: Material) -> Shape:
        return dataclasses.replace(self, material=material)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Raises:
            NonInvertibleMatrixError: If the transform is singular.
        """
        local_ray = ray.transform(self.transform.inverse())
        return self.local_intersect(local_ray)

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point.

        Raises:
            NonInvertibleMatrixError: If the transform is singular.
        """
        inverse = self.transform.inverse()
        local_point = inverse @ world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = inverse.transpose() @ local_normal
        return world_normal.to_vector().normalize()

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[Intersection]:
        """Intersect a ray already expressed in local space.

        Implementations must attach ``self`` to every intersection they
        produce.
        """

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Compute the (unnormalized) normal at a local-space point."""

"""Render driver: one ray per pixel through a wall plane.

The eye sits at ``ray_origin`` and looks toward a square wall of side
``wall_size`` centered on the z axis at ``z = wall_z``. Each canvas pixel maps
to one point on the wall. The ray from the eye through that point is
intersected with the shape; the visible hit is shaded with the Phong model
and written to the canvas. Pixels without a hit stay black.

Example:
    >>> from src.phongtrace.core.color import Color
    >>> from src.phongtrace.core.tuple import point
    >>> from src.phongtrace.geometry.sphere import sphere
    >>> from src.phongtrace.scene.light import PointLight
    >>> light = PointLight(Color(1.0, 1.0, 1.0), point(-10.0, 10.0, -10.0))
    >>> renderer = SphereRenderer(RenderConfig(canvas_pixels=64))
    >>> canvas = renderer.render(sphere(), light)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from src.phongtrace.core.color import Color
from src.phongtrace.core.ray import Ray
from src.phongtrace.core.tuple import Tuple, point
from src.phongtrace.geometry.shape import Shape
from src.phongtrace.materials.phong import lighting
from src.phongtrace.preview.canvas import Canvas
from src.phongtrace.scene.intersection import hit, intersect
from src.phongtrace.scene.light import PointLight

logger = logging.getLogger(__name__)

# Type alias for progress callback
# Callback receives (rows_done, total_rows)
ProgressCallback = Callable[[int, int], None]


@dataclass
class RenderConfig:
    """Configuration of the eye and the wall it looks through.

    Attributes:
        canvas_pixels: Width and height of the square canvas in pixels.
        wall_z: Z coordinate of the wall plane.
        wall_size: Side length of the square wall in world units.
        ray_origin: Eye position all rays start from.
    """

    canvas_pixels: int = 256
    wall_z: float = 10.0
    wall_size: float = 7.0
    ray_origin: Tuple = field(default_factory=lambda: point(0.0, 0.0, -5.0))

    def __post_init__(self) -> None:
        if self.canvas_pixels <= 0:
            raise ValueError(f"canvas_pixels must be positive, got {self.canvas_pixels}")
        if self.wall_size <= 0.0:
            raise ValueError(f"wall_size must be positive, got {self.wall_size}")
        if not self.ray_origin.is_point():
            raise ValueError(f"ray_origin must be a point, got {self.ray_origin!r}")

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the wall."""
        return self.wall_size / self.canvas_pixels

    @property
    def half(self) -> float:
        return self.wall_size / 2.0


class SphereRenderer:
    """Casts one ray per pixel at a single shape and shades the hits.

    Attributes:
        config: The eye/wall configuration used for every render.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config if config is not None else RenderConfig()

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Build the normalized ray from the eye through pixel ``(x, y)``."""
        cfg = self.config
        world_x = cfg.half - cfg.pixel_size * x
        world_y = cfg.half - cfg.pixel_size * y
        target = point(world_x, world_y, cfg.wall_z)
        return Ray(cfg.ray_origin, (target - cfg.ray_origin).normalize())

    def shade(self, ray: Ray, shape: Shape, light: PointLight) -> Color | None:
        """Evaluate the color seen along one ray.

        Returns:
            The shaded color of the visible hit, or None if the ray misses.

        Raises:
            NonInvertibleMatrixError: If the shape's transform is singular.
        """
        visible = hit(intersect(ray, shape))
        if visible is None:
            return None
        surface_point = ray.position_at(visible.t)
        normal = visible.object.normal_at(surface_point)
        eye = -ray.direction
        return lighting(visible.object.material, light, surface_point, eye, normal)

    def render(
        self,
        shape: Shape,
        light: PointLight,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render the shape into a new canvas.

        Args:
            shape: The shape to render.
            light: The single light illuminating it.
            callback: Optional function called after each row with
                (rows_done, total_rows).

        Returns:
            A canvas of ``canvas_pixels`` square.

        Raises:
            NonInvertibleMatrixError: If the shape's transform is singular.
        """
        size = self.config.canvas_pixels
        canvas = Canvas(size, size)
        logger.debug("Rendering %dx%d canvas", size, size)

        hits = 0
        for y in range(size):
            for x in range(size):
                color = self.shade(self.ray_for_pixel(x, y), shape, light)
                if color is not None:
                    canvas.set_pixel(x, y, color)
                    hits += 1
            if callback is not None:
                callback(y + 1, size)

        logger.debug("Rendered %d/%d pixels with a visible hit", hits, size * size)
        return canvas


def render_sphere(
    shape: Shape,
    light: PointLight,
    config: RenderConfig | None = None,
    callback: ProgressCallback | None = None,
) -> Canvas:
    """Render ``shape`` lit by ``light`` with a one-off renderer."""
    return SphereRenderer(config).render(shape, light, callback=callback)

"""Preview module for pixel buffers and image output.

Components:
    canvas: Float64 pixel buffer written by the render driver
    export: Plain-text PPM and PNG export

Example:
    >>> from src.phongtrace.preview import Canvas, save_image
    >>> canvas = Canvas(64, 64)
    >>> save_image(canvas, "out.ppm")
"""

from src.phongtrace.preview.canvas import Canvas
from src.phongtrace.preview.export import (
    canvas_to_ppm,
    image_to_uint8,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "Canvas",
    "canvas_to_ppm",
    "image_to_uint8",
    "save_ppm",
    "save_png",
    "save_image",
]

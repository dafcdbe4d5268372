"""Pixel buffer that collects shaded colors.

The canvas stores linear, unclamped colors in a float64 NumPy array of shape
``(height, width, 3)``. Row 0 is the top of the image. Encoding to 8-bit
happens in ``src.phongtrace.preview.export``.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.phongtrace.core.color import Color


class Canvas:
    """A mutable grid of colors, initialized to black.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a black canvas.

        Args:
            width: Image width in pixels.
            height: Image height in pixels.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Write a color at column ``x``, row ``y``.

        Raises:
            IndexError: If the coordinate lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.r, color.g, color.b)

    def pixel_at(self, x: int, y: int) -> Color:
        """Read the color at column ``x``, row ``y``.

        Raises:
            IndexError: If the coordinate lies outside the canvas.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the buffer with shape ``(height, width, 3)``."""
        return self._pixels.copy()

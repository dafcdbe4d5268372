"""RGB color values used throughout shading.

Colors are unbounded: channels may exceed 1.0 or go negative while lighting
is being accumulated. Clamping happens only when a canvas is encoded for
output (see ``src.phongtrace.preview.export``).
"""

from __future__ import annotations

from dataclasses import dataclass

from src.phongtrace.core.tuple import EPSILON


@dataclass(frozen=True)
class Color:
    """A linear RGB color.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        """Scale by a number, or take the Hadamard product with a color."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __truediv__(self, scalar: float) -> Color:
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def approx_eq(self, other: Color, epsilon: float = EPSILON) -> bool:
        return (
            abs(self.r - other.r) < epsilon
            and abs(self.g - other.g) < epsilon
            and abs(self.b - other.b) < epsilon
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)

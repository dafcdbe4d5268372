"""Light sources."""

from __future__ import annotations

from dataclasses import dataclass

from src.phongtrace.core.color import Color
from src.phongtrace.core.tuple import Tuple


@dataclass(frozen=True)
class PointLight:
    """A non-attenuated point light.

    Attributes:
        intensity: Color and brightness of the light.
        position: World-space point the light sits at.
    """

    intensity: Color
    position: Tuple

    def __post_init__(self) -> None:
        if not self.position.is_point():
            raise ValueError(f"Light position must be a point, got {self.position!r}")

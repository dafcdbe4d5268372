"""Pytest configuration for phongtrace tests.

This module provides shared fixtures: a default unit sphere and a white
point light in front of it.
"""

import pytest

from src.phongtrace.core.color import Color
from src.phongtrace.core.tuple import point
from src.phongtrace.geometry.sphere import Sphere, sphere
from src.phongtrace.scene.light import PointLight


@pytest.fixture
def unit_sphere() -> Sphere:
    """A unit sphere with identity transform and default material."""
    return sphere()


@pytest.fixture
def front_light() -> PointLight:
    """A white light on the negative z axis, in front of the unit sphere."""
    return PointLight(Color(1.0, 1.0, 1.0), point(0.0, 0.0, -10.0))

"""Phong material and local illumination.

The Phong model sums three terms for a single point light:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * (L . N)
    specular = intensity * specular * (R . E)^shininess

where ``effective_color = material.color * light.intensity``, ``L`` is the
unit vector toward the light, ``N`` the surface normal, ``E`` the eye vector
and ``R`` the reflection of ``-L`` about ``N``. Diffuse and specular are
dropped when the light is behind the surface (``L . N < 0``); specular alone
is dropped when the reflection points away from the eye (``R . E < 0``).

The result is not clamped.

Example:
    >>> from src.phongtrace.core.color import Color
    >>> from src.phongtrace.core.tuple import point, vector
    >>> from src.phongtrace.scene.light import PointLight
    >>> light = PointLight(Color(1.0, 1.0, 1.0), point(0.0, 0.0, -10.0))
    >>> eye = normal = vector(0.0, 0.0, -1.0)
    >>> lighting(Material(), light, point(0.0, 0.0, 0.0), eye, normal)
    Color(r=1.9, g=1.9, b=1.9)
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.phongtrace.core.color import BLACK, WHITE, Color
from src.phongtrace.core.tuple import Tuple, reflect
from src.phongtrace.scene.light import PointLight


@dataclass(frozen=True)
class Material:
    """Surface reflectance parameters for the Phong model.

    Attributes:
        color: Base surface color.
        ambient: Fraction of light reflected regardless of geometry.
        diffuse: Lambertian reflectance coefficient.
        specular: Specular highlight coefficient.
        shininess: Specular exponent; larger values give tighter highlights.
    """

    color: Color = field(default=WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular", "shininess"):
            value = getattr(self, name)
            if value < 0.0:
                raise ValueError(f"Material {name} = {value} is negative.")


def lighting(
    material: Material,
    light: PointLight,
    point: Tuple,
    eye_vector: Tuple,
    normal_vector: Tuple,
) -> Color:
    """Shade a surface point lit by a single point light.

    Args:
        material: Material of the surface.
        light: The light source.
        point: World-space point being shaded.
        eye_vector: Unit vector from the point toward the eye.
        normal_vector: Unit surface normal at the point.

    Returns:
        The unclamped sum of ambient, diffuse and specular contributions.

    Raises:
        DegenerateVectorError: If the light sits exactly on ``point``.
    """
    effective_color = material.color * light.intensity
    light_vector = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    light_dot_normal = light_vector.dot(normal_vector)
    if light_dot_normal < 0.0:
        # Light is on the other side of the surface
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal
    specular = BLACK
    reflect_vector = reflect(-light_vector, normal_vector)
    reflect_dot_eye = reflect_vector.dot(eye_vector)
    if reflect_dot_eye >= 0.0:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular

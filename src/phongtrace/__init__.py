"""Minimal Phong ray-tracing kernel.

This package casts rays against transformed primitives and shades the
nearest visible surface with a local illumination model:
- Homogeneous point/vector algebra and invertible 4x4 transforms
- Ray-sphere intersection in the sphere's local space
- Nearest-hit resolution over candidate intersections
- Phong lighting (ambient, diffuse, specular) from a point light

Subpackages:
    core: Tuples, matrices, rays, colors, and the render driver
    geometry: Shape base class and the unit sphere primitive
    materials: Phong material and lighting function
    scene: Intersection records, hit selection, and light sources
    preview: Canvas pixel buffer and PPM/PNG export
"""

__version__ = "0.1.0"

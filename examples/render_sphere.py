#!/usr/bin/env python3
"""Render a single Phong-shaded sphere.

This script casts one ray per pixel from an eye point through a wall plane at
a unit sphere, shades the visible surface with a point light, and writes the
canvas to a PPM or PNG file.

Usage:
    python -m examples.render_sphere [options]

Options:
    --size SIZE                 Canvas width and height in pixels (default: 256)
    --color R G B               Sphere color (default: 1.0 0.2 1.0)
    --light-position X Y Z      Light position (default: -10 10 -10)
    --scale X Y Z               Scale applied to the sphere (default: 1 1 1)
    --output OUTPUT             Output file, .ppm or .png (default: sphere.ppm)
    --quiet                     Suppress progress output
    --verbose                   Enable debug logging

Example:
    python -m examples.render_sphere --size 128 --scale 1 0.5 1 --output sphere.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from src.phongtrace.core.color import Color
from src.phongtrace.core.matrix import scaling
from src.phongtrace.core.render import RenderConfig, SphereRenderer
from src.phongtrace.core.tuple import point
from src.phongtrace.geometry.sphere import sphere
from src.phongtrace.materials.phong import Material
from src.phongtrace.preview.export import save_image
from src.phongtrace.scene.light import PointLight


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a single Phong-shaded sphere.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--size",
        type=int,
        default=256,
        help="Canvas width and height in pixels (default: 256)",
    )
    parser.add_argument(
        "--color",
        type=float,
        nargs=3,
        metavar=("R", "G", "B"),
        default=(1.0, 0.2, 1.0),
        help="Sphere color (default: 1.0 0.2 1.0)",
    )
    parser.add_argument(
        "--light-position",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=(-10.0, 10.0, -10.0),
        help="Light position (default: -10 10 -10)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=(1.0, 1.0, 1.0),
        help="Scale applied to the sphere (default: 1 1 1)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sphere.ppm",
        help="Output file path, .ppm or .png (default: sphere.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def render_sphere_image(
    size: int = 256,
    color: tuple[float, float, float] = (1.0, 0.2, 1.0),
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0),
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0),
    output_path: str = "sphere.ppm",
    quiet: bool = False,
) -> Path:
    """Render the sphere scene and save it to a file.

    Args:
        size: Canvas width and height in pixels.
        color: Base color of the sphere material.
        light_position: World-space position of the point light.
        scale: Per-axis scale applied to the unit sphere.
        output_path: Output file path (.ppm or .png).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    shape = sphere(Material(color=Color(*color))).with_transform(scaling(*scale))
    light = PointLight(Color(1.0, 1.0, 1.0), point(*light_position))

    renderer = SphereRenderer(RenderConfig(canvas_pixels=size))

    if not quiet:
        print(f"Rendering {size}x{size} sphere...")

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            progress_pct = (current / target) * 100 if target > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows ({progress_pct:.1f}%)",
                end="",
                flush=True,
            )

    canvas = renderer.render(shape, light, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = save_image(canvas, output_path)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        render_sphere_image(
            size=args.size,
            color=tuple(args.color),
            light_position=tuple(args.light_position),
            scale=tuple(args.scale),
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""Plot a projectile trajectory onto a canvas.

This script demonstrates the primitives end to end: it integrates a
projectile under gravity and wind with the Point/Vector algebra, marks every
position on a canvas and writes the canvas as a plain PPM file.

Usage:
    python -m examples.projectile [options]

Options:
    --width WIDTH       Canvas width in pixels (default: 900)
    --height HEIGHT     Canvas height in pixels (default: 550)
    --speed SPEED       Launch speed (default: 10.5)
    --output OUTPUT     Output file path (default: projectile.ppm)
    --quiet             Suppress progress output

Example:
    python -m examples.projectile --speed 11.25 --output arc.ppm
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Plot a projectile trajectory onto a canvas.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=900,
        help="Canvas width in pixels (default: 900)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=550,
        help="Canvas height in pixels (default: 550)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=10.5,
        help="Launch speed (default: 10.5)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="projectile.ppm",
        help="Output file path (default: projectile.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def plot_projectile(
    width: int = 900,
    height: int = 550,
    speed: float = 10.5,
    output_path: str = "projectile.ppm",
    quiet: bool = False,
) -> Path:
    """Simulate a projectile, plot it and save the canvas as PPM.

    Args:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        speed: Magnitude of the launch velocity.
        output_path: Output file path (PPM).
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved PPM file.
    """
    # Lazy imports to allow Taichi initialization first
    from src.raytracer.core.canvas import Canvas
    from src.raytracer.core.color import Color
    from src.raytracer.core.tuples import Point, Vector
    from src.raytracer.preview.raster import PPM_MAX_LINE_LENGTH
    from src.raytracer.simulation.projectile import Environment, Projectile, simulate

    start = Projectile(
        position=Point(0, 1, 0),
        velocity=Vector(1, 1, 0).normalize() * speed,
    )
    environment = Environment(
        gravity=Vector(0, -0.1, 0),
        wind=Vector(-0.02, 0, 0),
    )

    canvas = Canvas(width, height)
    trail = Color(1.0, 0.8, 0.6)

    plotted = 0
    ticks = 0
    for state in simulate(environment, start):
        ticks += 1
        column = round(state.position.x)
        # Canvas rows grow downward, world y grows upward
        row = height - 1 - round(state.position.y)
        if 0 <= column < width and 0 <= row < height:
            canvas.write_pixel(column, row, trail)
            plotted += 1

    if not quiet:
        print(f"Simulated {ticks} ticks, plotted {plotted} positions on {width}x{height}")

    output_file = Path(output_path)
    output_file.write_text(canvas.to_raster_text(max_line_length=PPM_MAX_LINE_LENGTH))

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    ti.init(arch=ti.cpu)

    try:
        plot_projectile(
            width=args.width,
            height=args.height,
            speed=args.speed,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

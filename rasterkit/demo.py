"""Demonstration scenes rendered to PPM files."""

from __future__ import annotations

import argparse
import math
import random
import sys
from pathlib import Path
from typing import Sequence

from rasterkit import ppm
from rasterkit.canvas import Canvas
from rasterkit.line_render import LineRenderer
from rasterkit.ppm import PpmError, PpmErrorKind, PpmFormat
from rasterkit.primitives import CHANNEL_MAX, GREEN, Color, Vec2, make_vertex
from rasterkit.shaders import BlackWhiteShader
from rasterkit.triangle_render import TriangleRenderer

DEFAULT_SOURCE = Path("../homework/04-render-basics/leo.ppm")
DEFAULT_OUTPUT_DIR = Path("04-0-output-images")


def _target(output_dir, name: str) -> Path:
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    return directory / name


def _load_file(path: Path) -> Canvas:
    try:
        with path.open("rb") as src:
            return ppm.load(src)
    except OSError as exc:
        raise PpmError(PpmErrorKind.BAD_STREAM) from exc


def _save(img: Canvas, path: Path, fmt: PpmFormat) -> Path:
    try:
        with path.open("wb") as dst:
            ppm.dump(dst, img, fmt)
    except OSError as exc:
        raise PpmError(PpmErrorKind.BAD_STREAM) from exc
    return path


def dump_load_compare(source, output_dir) -> bool:
    """Load ``source``, write it as P6, read it back and compare the two images.

    Raises PpmError when any step fails.
    """
    first = Canvas(fill_color=GREEN)
    first = _load_file(Path(source))
    out = _save(first, _target(output_dir, "canvas-dump-load-test-out.ppm"), PpmFormat.P6)
    second = _load_file(out)
    return first == second


def draw_lines(output_dir) -> Path:
    """Draw 300 pseudo-random coloured lines."""
    img = Canvas(480, 270)
    render = LineRenderer(img)
    render.clear()
    rng = random.Random(0)
    for _ in range(300):
        start = Vec2(rng.randrange(img.width), rng.randrange(img.height))
        end = Vec2(rng.randrange(img.width), rng.randrange(img.height))
        color = Color(rng.randrange(256), rng.randrange(256), rng.randrange(256))
        render.draw(start, end, color)
    return _save(img, _target(output_dir, "line-render.ppm"), PpmFormat.P3)


def draw_triangle(output_dir) -> Path:
    """Outline a spiral of shrinking triangles."""
    w = h = 1080
    img = Canvas(w, h)
    render = TriangleRenderer(img)
    render.clear()

    cx, cy = w // 2, h // 2
    radius = min(w, h) // 2 * 9 // 10
    radius_step = 2
    angle_max = math.pi * 15
    angle_step = math.pi / 16

    corners = []
    angle = 0.0
    while angle < angle_max:
        radius -= radius_step
        for offset in (0.0, math.pi / 6, math.pi / 4):
            corners.append(
                Vec2(
                    int(cx + radius * math.cos(angle + offset)),
                    int(cy + radius * math.sin(angle + offset)),
                )
            )
        angle += angle_step

    render.draw_triangles(corners, Color(0, 0, 255))
    return _save(img, _target(output_dir, "triangle-render.ppm"), PpmFormat.P6)


def draw_triangle_with_indices(output_dir) -> Path:
    """Outline two triangles picked from a vertex list by indices."""
    img = Canvas(640, 360)
    render = TriangleRenderer(img)
    vertices = [
        Vec2(10, 10), Vec2(600, 10), Vec2(600, 300),
        Vec2(10, 300), Vec2(10, 10), Vec2(600, 300),
    ]
    indexes = [0, 1, 4, 2, 3, 5]
    render.clear()
    render.draw_indexed(vertices, indexes, Color(0, 20, 240))
    return _save(img, _target(output_dir, "triangle-indexed-render.ppm"), PpmFormat.P6)


def rasterize_triangle(output_dir) -> Path:
    """Fill one triangle with interpolated red, green and blue corners."""
    img = Canvas(640, 360)
    render = TriangleRenderer(img)
    render.clear()
    vertices = [
        make_vertex(10, 10, 255, 0, 0),
        make_vertex(600, 150, 0, 255, 0),
        make_vertex(200, 300, 0, 0, 255),
    ]
    render.rasterize(vertices)
    return _save(img, _target(output_dir, "triangle-rasterize.ppm"), PpmFormat.P6)


def rasterize_triangles(output_dir) -> Path:
    """Fill a spiral of triangles with cycling colours."""
    w = h = 1080
    img = Canvas(w, h)
    render = TriangleRenderer(img)
    render.clear()

    cx, cy = w / 2.0, h / 2.0
    radius = min(w, h) // 2 * 9 // 10
    radius_step = 2
    angle_max = math.pi * 12
    angle_step = math.pi / 16
    r = g = b = 0

    triangles = []
    angle = 0.0
    while angle < angle_max:
        radius -= radius_step
        for offset in (0.0, math.pi / 6, math.pi / 2):
            triangles.append(
                make_vertex(
                    cx + radius * math.cos(angle + offset),
                    cy + radius * math.sin(angle + offset),
                    r,
                    g,
                    b,
                )
            )
        r = (r + 1) & 0xFF
        g = (g + r) & 0xFF
        b = (b + g) & 0xFF
        if r >= CHANNEL_MAX:
            r = 0
        if g >= CHANNEL_MAX:
            g = 0
        if b >= CHANNEL_MAX:
            b = 0
        angle += angle_step

    render.rasterize(triangles)
    return _save(img, _target(output_dir, "triangles-rasterize-2.ppm"), PpmFormat.P6)


def rasterize_indexed_triangles(output_dir) -> Path:
    """Fill two indexed triangles meeting at the middle of the image."""
    img = Canvas(640, 360)
    render = TriangleRenderer(img)
    render.clear()
    vertices = [
        make_vertex(40, 40, 255, 0, 0), make_vertex(600, 40, 0, 255, 0),
        make_vertex(300, 150, 0, 0, 255), make_vertex(40, 320, 255, 0, 0),
        make_vertex(600, 320, 0, 255, 0), make_vertex(300, 150, 0, 0, 255),
    ]
    indices = [0, 3, 2, 1, 4, 5]
    render.rasterize_indexed(vertices, indices)
    return _save(img, _target(output_dir, "indexed-triangle-rasterize.ppm"), PpmFormat.P6)


def black_white_triangle(output_dir) -> Path:
    """Fill a triangle through the black-and-white shader."""
    img = Canvas(640, 360)
    render = TriangleRenderer(img)
    render.program = BlackWhiteShader(buf=img)
    vertices = [
        make_vertex(40, 40, 180, 50, 180, 0, 0),
        make_vertex(600, 300, 180, 25, 0, 1.0, 1.0),
        make_vertex(600, 40, 0, 0, 0, 0.0, 0.0),
    ]
    indices = [0, 2, 1]
    render.rasterize_indexed(vertices, indices)
    return _save(img, _target(output_dir, "black-white-triangle.ppm"), PpmFormat.P3)


def run_all(source, output_dir) -> bool:
    """Render every scene; return whether the dump/load comparison succeeded."""
    try:
        same = dump_load_compare(source, output_dir)
    except PpmError as exc:
        print(exc, file=sys.stderr)
        same = False
    print(f"dump_load_compare {'SUCCESS' if same else 'FAIL'}")

    steps = (
        ("lines drawn", draw_lines),
        ("draw_triangle", draw_triangle),
        ("draw_triangle_with_indices", draw_triangle_with_indices),
        ("rasterize_triangle", rasterize_triangle),
        ("rasterize_triangles", rasterize_triangles),
        ("rasterize_indexed_triangles", rasterize_indexed_triangles),
        ("black_white_triangle", black_white_triangle),
    )
    for message, step in steps:
        step(output_dir)
        print(message, file=sys.stderr)
    return same


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point; renders every scene into the output directory."""
    parser = argparse.ArgumentParser(description="Render demonstration scenes to PPM files.")
    parser.add_argument("source", nargs="?", default=str(DEFAULT_SOURCE))
    parser.add_argument("output_dir", nargs="?", default=str(DEFAULT_OUTPUT_DIR))
    args = parser.parse_args(argv)
    try:
        run_all(args.source, args.output_dir)
    except (PpmError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
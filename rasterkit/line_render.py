"""Line rendering onto a canvas with Bresenham's algorithm."""

from __future__ import annotations

import math
from typing import Iterable

from rasterkit.canvas import Canvas
from rasterkit.primitives import BLACK, Color, Position, Vec2, Vertex
from rasterkit.shaders import PassThroughShader, Shader


def _lerp(a: float, b: float, t: float) -> float:
    if t == 1:
        return b
    return a + t * (b - a)


def _channel(a: int, b: int, t: float) -> int:
    # Values outside [0, 255] wrap the way an 8-bit integer cast does.
    return int(_lerp(a, b, t)) & 0xFF


def interpolate_position(p1: Position, p2: Position, t: float) -> Position:
    """Linearly interpolate between two positions, truncating to integers."""
    return Vec2(int(_lerp(p1.x, p2.x, t)), int(_lerp(p1.y, p2.y, t)))


def interpolate_vertex(v1: Vertex, v2: Vertex, t: float) -> Vertex:
    """Linearly interpolate position, colour and texture coordinate."""
    return Vertex(
        Vec2(_lerp(v1.pos.x, v2.pos.x, t), _lerp(v1.pos.y, v2.pos.y, t)),
        Color(
            _channel(v1.rgb.r, v2.rgb.r, t),
            _channel(v1.rgb.g, v2.rgb.g, t),
            _channel(v1.rgb.b, v2.rgb.b, t),
        ),
        Vec2(_lerp(v1.tpos.x, v2.tpos.x, t), _lerp(v1.tpos.y, v2.tpos.y, t)),
    )


class LineRenderer:
    """Draws lines and shaded vertices onto a canvas."""

    def __init__(self, canvas: Canvas):
        self.canvas = canvas
        self.program: Shader = PassThroughShader()

    def clear(self, color: Color = BLACK) -> None:
        """Fill the whole canvas with ``color``."""
        self.canvas.fill(color)

    def line(self, p1: Position, p2: Position) -> list[Position]:
        """Return the integer pixels of the segment from ``p1`` to ``p2``."""
        x1, y1, x2, y2 = int(p1.x), int(p1.y), int(p2.x), int(p2.y)

        steep = abs(x2 - x1) < abs(y2 - y1)
        if steep:
            x1, y1, x2, y2 = y1, x1, y2, x2
        if x1 > x2:
            x1, y1, x2, y2 = x2, y2, x1, y1

        dx = x2 - x1
        dy = abs(y2 - y1)
        y_step = -1 if y1 > y2 else 1
        half_dx = dx // 2
        error = 0
        yi = y1
        result = []
        for xi in range(x1, x2 + 1):
            result.append(Vec2(yi, xi) if steep else Vec2(xi, yi))
            error += dy
            if error > half_dx:
                yi += y_step
                error -= dx
        return result

    def vertex_line(self, v1: Vertex, v2: Vertex) -> list[Vertex]:
        """Interpolate vertices along x from ``v1`` towards ``v2``."""
        count = abs(v2.pos.x - v1.pos.x)
        if count < 1:
            return [v1]
        step = 1 / (count + 1)
        result = []
        ti = 0.0
        for _ in range(math.ceil(count + 1)):
            result.append(interpolate_vertex(v1, v2, ti))
            ti += step
        return result

    def draw(self, p1: Position, p2: Position, color: Color) -> None:
        """Draw a segment in a single colour."""
        for pos in self.line(p1, p2):
            self.canvas[pos.y, pos.x] = color

    def draw_vertices(self, vertices: Iterable[Vertex]) -> None:
        """Colour each vertex's pixel with the fragment shader.

        Vertices that fall outside the canvas are skipped.
        """
        width, height = self.canvas.width, self.canvas.height
        for v in vertices:
            x, y = int(v.pos.x), int(v.pos.y)
            if 0 <= x < width and 0 <= y < height:
                self.canvas[y, x] = self.program.fragment_shader(v)
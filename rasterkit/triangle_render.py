"""Triangle outlines and scanline rasterisation."""

from __future__ import annotations

import math
from typing import Sequence

from rasterkit.line_render import LineRenderer, interpolate_vertex
from rasterkit.primitives import Color, Position, Vec2, Vertex


def _take(items: Sequence, index: int):
    if index < 0:
        raise IndexError(f"index {index} is out of range")
    return items[index]


def _triples(items: Sequence):
    for start in range(0, len(items) - 2, 3):
        yield items[start], items[start + 1], items[start + 2]


def _minmax(a: Vertex, b: Vertex) -> tuple[Vertex, Vertex]:
    if b.pos.y < a.pos.y:
        return b, a
    return a, b


def _sorted_by_y(v1: Vertex, v2: Vertex, v3: Vertex):
    low12, high12 = _minmax(v1, v2)
    mid_candidate, top = _minmax(high12, v3)
    bottom, mid = _minmax(low12, mid_candidate)
    return bottom, mid, top


def _reciprocal(value: float) -> float:
    return math.inf if value == 0 else 1.0 / value


class TriangleRenderer(LineRenderer):
    """Draws triangle outlines and fills triangles by interpolation."""

    def polyline(self, p1: Position, p2: Position, p3: Position) -> list[Position]:
        """Return a buffer sized for the three edges, each written to its tail.

        Later edges overwrite the end of the buffer, so the last edge always
        occupies the final positions.
        """
        edges = [self.line(p1, p2), self.line(p1, p3), self.line(p2, p3)]
        size = sum(len(edge) for edge in edges)
        result = [Vec2(0, 0)] * size
        for edge in edges:
            result[size - len(edge) :] = edge
        return result

    def _outline(self, a: Position, b: Position, c: Position, color: Color) -> None:
        self.draw(a, b, color)
        self.draw(b, c, color)
        self.draw(c, a, color)

    def draw_triangles(self, vertices: Sequence[Position], color: Color) -> None:
        """Outline every complete group of three positions."""
        for a, b, c in _triples(vertices):
            self._outline(a, b, c, color)

    def draw_indexed(
        self, vertices: Sequence[Position], indexes: Sequence[int], color: Color
    ) -> None:
        """Outline triangles whose corners are picked by ``indexes``."""
        for i, j, k in _triples(indexes):
            self._outline(
                _take(vertices, i), _take(vertices, j), _take(vertices, k), color
            )

    def rasterize_naive(self, vertices: Sequence[Position], color: Color) -> None:
        """Fill a triangle by fanning Bresenham lines from its second corner."""
        if len(vertices) != 3:
            return
        self.draw_triangles(vertices, color)
        for pos in self.line(vertices[0], vertices[2]):
            self.draw_triangles(self.line(vertices[1], pos), color)

    def rasterize(self, vertices: Sequence[Vertex]) -> None:
        """Fill every complete group of three vertices."""
        for a, b, c in _triples(vertices):
            self.rasterize_triangle(a, b, c)

    def rasterize_indexed(
        self, vertices: Sequence[Vertex], indices: Sequence[int]
    ) -> None:
        """Fill indexed triangles, passing corners through the vertex shader."""
        shade = self.program.vertex_shader
        for i, j, k in _triples(indices):
            self.rasterize_triangle(
                shade(_take(vertices, i)),
                shade(_take(vertices, j)),
                shade(_take(vertices, k)),
            )

    def _spans(self, v1: Vertex, v2: Vertex, v3: Vertex):
        bottom, mid, top = _sorted_by_y(v1, v2, v3)
        part_top_mid = _reciprocal(top.pos.y - mid.pos.y)
        part_top_bottom = _reciprocal(top.pos.y - bottom.pos.y)
        part_mid_bottom = _reciprocal(mid.pos.y - bottom.pos.y)

        if math.isinf(part_top_bottom):
            yield self.vertex_line(bottom, mid)
            yield self.vertex_line(mid, top)
            yield self.vertex_line(bottom, top)
            return

        t1 = t2 = 0.0
        while t1 < 1.0:
            yield self.vertex_line(
                interpolate_vertex(top, mid, t1),
                interpolate_vertex(top, bottom, t2),
            )
            t1 += part_top_mid
            t2 += part_top_bottom

        t1 = 0.0
        while t1 < 1.0:
            yield self.vertex_line(
                interpolate_vertex(mid, bottom, t1),
                interpolate_vertex(top, bottom, t2),
            )
            t1 += part_mid_bottom
            t2 += part_top_bottom

    def rasterize_triangle(self, v1: Vertex, v2: Vertex, v3: Vertex) -> None:
        """Fill one triangle with interpolated, shaded horizontal spans."""
        for span in self._spans(v1, v2, v3):
            self.draw_vertices(span)

    def triangle_vertices(self, v1: Vertex, v2: Vertex, v3: Vertex) -> list[Vertex]:
        """Return all interpolated vertices that fill the triangle."""
        return [v for span in self._spans(v1, v2, v3) for v in span]
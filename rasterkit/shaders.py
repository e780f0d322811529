"""Vertex and fragment shader programs used by the renderers."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from rasterkit.canvas import Canvas
from rasterkit.primitives import BLACK, CHANNEL_MAX, Color, Vertex

FLOAT_MAX = 3.4028234663852886e38


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _texture(buf: Canvas | None) -> Canvas:
    if buf is None:
        raise ValueError("shader has no texture bound")
    return buf


def _texel(buf: Canvas, v: Vertex) -> tuple[int, int, int, int]:
    """Return (max column, max row, column, row) of the texel under ``v``."""
    width = buf.width - 1
    height = buf.height - 1
    return width, height, int(v.tpos.x * width), int(v.tpos.y * height)


class Shader(ABC):
    """A pair of per-vertex and per-fragment programs."""

    def vertex_shader(self, v: Vertex) -> Vertex:
        return v

    @abstractmethod
    def fragment_shader(self, v: Vertex) -> Color:
        """Return the colour of the fragment at ``v``."""


class PassThroughShader(Shader):
    """Uses the vertex colour as is."""

    def fragment_shader(self, v: Vertex) -> Color:
        return v.rgb


@dataclass
class TextureShader(Shader):
    """Samples a texture at the vertex texture coordinate."""

    buf: Canvas | None = None

    def fragment_shader(self, v: Vertex) -> Color:
        buf = _texture(self.buf)
        _, _, x, y = _texel(buf, v)
        return buf[y, x]


@dataclass
class BlackWhiteShader(Shader):
    """Turns the vertex colour into a grey level, wrapping on 8-bit overflow."""

    buf: Canvas | None = None

    def fragment_shader(self, v: Vertex) -> Color:
        average = (v.rgb.r + v.rgb.g + v.rgb.b) // 3
        level = (average * CHANNEL_MAX) & 0xFF
        return Color(level, level, level)


@dataclass
class FunnyMomentShader(Shader):
    """Pulls the texture towards the mouse position."""

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    radius: float = 30.0
    buf: Canvas | None = None

    def fragment_shader(self, v: Vertex) -> Color:
        buf = _texture(self.buf)
        width, height, x, y = _texel(buf, v)
        dx = int(v.pos.x - self.mouse_x)
        dy = int(v.pos.y - self.mouse_y)
        distance = math.sqrt(dx * dx + dy * dy)

        ratio = FLOAT_MAX if self.radius < 0.001 else distance / self.radius
        if ratio < 0.001:
            ratio = FLOAT_MAX

        res_x = _clamp(int(x - dx / ratio), 0, width)
        res_y = _clamp(int(y - dy / ratio), 0, height)
        return buf[res_y, res_x]


@dataclass
class MagnifierShader(Shader):
    """Draws a ringed lens around the mouse that scales the texture inside it."""

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    radius: float = 30.0
    scale: float = 0.1
    buf: Canvas | None = None

    def fragment_shader(self, v: Vertex) -> Color:
        buf = _texture(self.buf)
        width, height, x, y = _texel(buf, v)
        dx = int(v.pos.x - self.mouse_x)
        dy = int(v.pos.y - self.mouse_y)
        distance = math.sqrt(dx * dx + dy * dy)

        result = buf[y, x]
        if abs(distance - self.radius) < 2:
            result = BLACK
        if distance < self.radius:
            res_x = _clamp(int(x - dx * self.scale), 0, width - 1)
            res_y = _clamp(int(y - dy * self.scale), 0, height - 1)
            result = buf[res_y, res_x]
        return result


@dataclass
class BlurShader(Shader):
    """Box-blurs the texture within a radius of the mouse."""

    mouse_x: float = 0.0
    mouse_y: float = 0.0
    strength: float = 5.0
    radius: float = 30.0
    buf: Canvas | None = None

    def fragment_shader(self, v: Vertex) -> Color:
        buf = _texture(self.buf)
        width, height, x, y = _texel(buf, v)
        dx = int(v.pos.x - self.mouse_x)
        dy = int(v.pos.y - self.mouse_y)
        distance = math.sqrt(dx * dx + dy * dy)

        result = buf[y, x]
        if distance >= self.radius:
            return result

        first_col = _clamp(int(x - self.strength), 0, width - 1)
        first_row = _clamp(int(y - self.strength), 0, height - 1)
        last_col = _clamp(int(x + self.strength), 0, width - 1)
        last_row = _clamp(int(y + self.strength), 0, height - 1)

        window = [
            buf[row, col]
            for col in range(first_col, last_col)
            for row in range(first_row, last_row)
        ]
        if not window:
            return result
        count = len(window)
        return Color(
            int(sum(p.r for p in window) / count),
            int(sum(p.g for p in window) / count),
            int(sum(p.b for p in window) / count),
        )
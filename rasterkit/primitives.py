"""Colours, small vectors and vertices shared by the renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Sequence

CHANNEL_MIN = 0
CHANNEL_MAX = 255


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    r: int = CHANNEL_MIN
    g: int = CHANNEL_MIN
    b: int = CHANNEL_MIN

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                raise ValueError(
                    f"channel {name}={value} is outside "
                    f"[{CHANNEL_MIN}, {CHANNEL_MAX}]"
                )

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b


BLACK = Color(CHANNEL_MIN, CHANNEL_MIN, CHANNEL_MIN)
WHITE = Color(CHANNEL_MAX, CHANNEL_MAX, CHANNEL_MAX)
RED = Color(CHANNEL_MAX, CHANNEL_MIN, CHANNEL_MIN)
GREEN = Color(CHANNEL_MIN, CHANNEL_MAX, CHANNEL_MIN)
BLUE = Color(CHANNEL_MIN, CHANNEL_MIN, CHANNEL_MAX)


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0
    y: float = 0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return type(self)(self.x + other.x, self.y + other.y)


Position = Vec2


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0
    y: float = 0
    z: float = 0


@dataclass(frozen=True)
class Vertex:
    """A screen position with a colour and a texture coordinate."""

    pos: Vec2 = Vec2()
    rgb: Color = BLACK
    tpos: Vec2 = Vec2()


def combine(lhs: Sequence[Any], rhs: Sequence[Any], func: Callable[[Any, Any], Any]):
    """Apply ``func`` pairwise to two equally long sequences.

    Lists and tuples keep their type; any other sequence gives a list.
    """
    if len(lhs) != len(rhs):
        raise ValueError("size of sequences should be equal")
    result = [func(a, b) for a, b in zip(lhs, rhs)]
    if isinstance(lhs, (list, tuple)):
        return type(lhs)(result)
    return result


def make_vertex(x, y, r=0, g=0, b=0, tx=0.0, ty=0.0) -> Vertex:
    """Build a vertex from flat coordinates, colour channels and texture position."""
    return Vertex(Vec2(x, y), Color(r, g, b), Vec2(tx, ty))
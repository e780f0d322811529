"""A row-major RGB pixel buffer."""

from __future__ import annotations

from typing import Iterator

from rasterkit.primitives import BLACK, Color

_CHANNELS = 3


class Canvas:
    """A width x height grid of colours addressed as ``canvas[row, col]``."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, width: int = 0, height: int = 0, fill_color: Color = BLACK):
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self._width = width
        self._height = height
        self._pixels = [fill_color] * (width * height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _index(self, key) -> int:
        row, col = key
        if not (0 <= row < self._height and 0 <= col < self._width):
            raise IndexError(
                f"pixel ({row}, {col}) outside {self._width}x{self._height} canvas"
            )
        return row * self._width + col

    def __getitem__(self, key) -> Color:
        return self._pixels[self._index(key)]

    def __setitem__(self, key, value: Color) -> None:
        self._pixels[self._index(key)] = value

    def __iter__(self) -> Iterator[Color]:
        return iter(self._pixels)

    def __eq__(self, other: object) -> bool:
        # Only the pixel buffers are compared, not the dimensions.
        if not isinstance(other, Canvas):
            return NotImplemented
        return self._pixels == other._pixels

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

    def fill(self, value: Color) -> None:
        """Set every pixel to ``value``."""
        self._pixels = [value] * len(self._pixels)

    def resize(self, width: int, height: int) -> None:
        """Change dimensions, keeping the leading pixels and padding with black."""
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        size = width * height
        kept = self._pixels[:size]
        self._pixels = kept + [BLACK] * (size - len(kept))
        self._width = width
        self._height = height

    def transpose(self) -> None:
        """Swap rows and columns."""
        w = self._width
        self._pixels = [p for i in range(w) for p in self._pixels[i::w]]
        self._width, self._height = self._height, self._width

    def to_bytes(self) -> bytes:
        """Return the pixels as packed RGB24 bytes."""
        return bytes(channel for pixel in self._pixels for channel in pixel)

    def load_bytes(self, data: bytes) -> None:
        """Overwrite pixels from packed RGB24 bytes.

        Shorter data replaces only the leading bytes; longer data is an error.
        """
        raw = bytearray(self.to_bytes())
        if len(data) > len(raw):
            raise ValueError(
                f"{len(data)} bytes do not fit a canvas of {len(raw)} bytes"
            )
        raw[: len(data)] = data
        self._pixels = [
            Color(raw[i], raw[i + 1], raw[i + 2])
            for i in range(0, len(raw), _CHANNELS)
        ]
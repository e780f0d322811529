"""Reading and writing PPM images in the P3 (text) and P6 (binary) formats."""

from __future__ import annotations

from enum import Enum
from typing import BinaryIO, Union

from rasterkit.canvas import Canvas
from rasterkit.primitives import CHANNEL_MAX

MAX_IMAGE_SIZE = 1 << 12
MIN_IMAGE_SIZE = 0
MAX_COLOR_VALUE = CHANNEL_MAX
MIN_COLOR_VALUE = 0

_WHITESPACE = b" \t\n\v\f\r"
_DIGITS = b"0123456789"


class PpmFormat(Enum):
    P3 = "P3"
    P6 = "P6"


class PpmErrorKind(Enum):
    NO_ERROR = "no_error"
    BAD_STREAM = "bad_stream"
    INCORRECT_FORMAT = "incorrect_format"
    VIOLATION_LIMITS = "violation_limits"
    INCORRECT_HEADER = "incorrect_header"


_DESCRIPTIONS = {
    PpmErrorKind.NO_ERROR: "INFO: no errors were occured",
    PpmErrorKind.BAD_STREAM: (
        "ERROR: bad stream was provided in arguments, or fail when "
        "reading or writing"
    ),
    PpmErrorKind.INCORRECT_FORMAT: "ERROR: incorrect format, it should be P3 or P6",
    PpmErrorKind.VIOLATION_LIMITS: (
        "ERROR: image width, height or max color value are out of bounds"
    ),
    PpmErrorKind.INCORRECT_HEADER: "ERROR: header formatting is incorrect",
}


def describe(kind) -> str:
    """Return the human-readable message for an error kind."""
    return _DESCRIPTIONS.get(kind, "unknown error type was provided")


class PpmError(Exception):
    """Raised when a PPM image cannot be read or written."""

    def __init__(self, kind: PpmErrorKind):
        super().__init__(describe(kind))
        self.kind = kind


class _Reader:
    """Whitespace-separated token reader over a byte string."""

    def __init__(self, data: bytes):
        self._data = data
        self._pos = 0

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._data) and self._data[self._pos] in _WHITESPACE:
            self._pos += 1

    def word(self) -> str | None:
        self._skip_whitespace()
        start = self._pos
        while self._pos < len(self._data) and self._data[self._pos] not in _WHITESPACE:
            self._pos += 1
        if start == self._pos:
            return None
        return self._data[start : self._pos].decode("latin-1")

    def number(self) -> int | None:
        self._skip_whitespace()
        start = self._pos
        pos = start
        if pos < len(self._data) and self._data[pos] in b"+-":
            pos += 1
        digits_start = pos
        while pos < len(self._data) and self._data[pos] in _DIGITS:
            pos += 1
        if pos == digits_start:
            return None
        self._pos = pos
        return int(self._data[start:pos])

    def byte(self) -> int | None:
        if self._pos >= len(self._data):
            return None
        value = self._data[self._pos]
        self._pos += 1
        return value

    def read(self, size: int) -> bytes:
        chunk = self._data[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk


def _read_all(src) -> bytes:
    if isinstance(src, (bytes, bytearray, memoryview)):
        return bytes(src)
    try:
        data = src.read()
    except (OSError, ValueError) as exc:
        raise PpmError(PpmErrorKind.BAD_STREAM) from exc
    if isinstance(data, str):
        data = data.encode("latin-1")
    return data


def load(src: Union[BinaryIO, bytes]) -> Canvas:
    """Read a P3 or P6 image from a binary stream or a bytes object."""
    reader = _Reader(_read_all(src))
    fmt = reader.word()
    width = reader.number()
    height = reader.number()
    max_color = reader.number()
    separator = reader.byte()

    if None in (fmt, width, height, max_color, separator):
        raise PpmError(PpmErrorKind.BAD_STREAM)
    if fmt not in (PpmFormat.P3.value, PpmFormat.P6.value):
        raise PpmError(PpmErrorKind.INCORRECT_FORMAT)
    if (
        not MIN_IMAGE_SIZE <= width <= MAX_IMAGE_SIZE
        or not MIN_IMAGE_SIZE <= height <= MAX_IMAGE_SIZE
        or max_color != MAX_COLOR_VALUE
    ):
        raise PpmError(PpmErrorKind.VIOLATION_LIMITS)
    if separator not in _WHITESPACE:
        raise PpmError(PpmErrorKind.INCORRECT_HEADER)

    img = Canvas(width, height)
    size = width * height * 3
    if fmt == PpmFormat.P6.value:
        img.load_bytes(reader.read(size))
    else:
        channels = bytearray()
        for _ in range(size):
            value = reader.number()
            if value is None:
                break
            channels.append(value & 0xFF)
        img.load_bytes(bytes(channels))
    return img


def _encode(img: Canvas, fmt: PpmFormat) -> bytes:
    header = f"{fmt.value} {img.width} {img.height} {MAX_COLOR_VALUE} ".encode("ascii")
    pixels = img.to_bytes()
    if fmt is PpmFormat.P3:
        return header + "".join(f"{channel} " for channel in pixels).encode("ascii")
    return header + pixels


def dump(dst: BinaryIO, img: Canvas, fmt: PpmFormat = PpmFormat.P6) -> None:
    """Write ``img`` to a binary stream in the given format."""
    if getattr(dst, "closed", False):
        raise PpmError(PpmErrorKind.BAD_STREAM)
    payload = _encode(img, PpmFormat(fmt))
    try:
        dst.write(payload)
    except (OSError, ValueError) as exc:
        raise PpmError(PpmErrorKind.BAD_STREAM) from exc
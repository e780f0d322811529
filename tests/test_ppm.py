import io

import pytest

from rasterkit.canvas import Canvas
from rasterkit.ppm import (
    MAX_IMAGE_SIZE,
    PpmError,
    PpmErrorKind,
    PpmFormat,
    describe,
    dump,
    load,
)
from rasterkit.primitives import BLACK, RED, Color


def _sample():
    img = Canvas(3, 2)
    img.load_bytes(bytes(range(0, 18 * 10, 10)))
    return img


def test_describe_messages():
    assert describe(PpmErrorKind.NO_ERROR) == "INFO: no errors were occured"
    assert describe(PpmErrorKind.INCORRECT_FORMAT) == (
        "ERROR: incorrect format, it should be P3 or P6"
    )
    assert describe(PpmErrorKind.INCORRECT_HEADER) == (
        "ERROR: header formatting is incorrect"
    )
    assert describe("something else") == "unknown error type was provided"


def test_error_carries_kind_and_message():
    err = PpmError(PpmErrorKind.VIOLATION_LIMITS)
    assert err.kind is PpmErrorKind.VIOLATION_LIMITS
    assert str(err) == describe(PpmErrorKind.VIOLATION_LIMITS)


@pytest.mark.parametrize("fmt", [PpmFormat.P3, PpmFormat.P6])
def test_round_trip(fmt):
    buf = io.BytesIO()
    dump(buf, _sample(), fmt)
    buf.seek(0)
    loaded = load(buf)
    assert loaded == _sample()
    assert (loaded.width, loaded.height) == (3, 2)


def test_p6_header_and_payload():
    buf = io.BytesIO()
    img = _sample()
    dump(buf, img, PpmFormat.P6)
    assert buf.getvalue() == b"P6 3 2 255 " + img.to_bytes()


def test_p3_text_layout():
    buf = io.BytesIO()
    dump(buf, Canvas(1, 1, RED), PpmFormat.P3)
    assert buf.getvalue() == b"P3 1 1 255 255 0 0 "


def test_load_accepts_bytes():
    img = load(b"P6 1 1 255\n" + bytes([1, 2, 3]))
    assert img[0, 0] == Color(1, 2, 3)


def test_short_p6_data_leaves_rest_black():
    img = load(b"P6 2 1 255 " + bytes([255, 0, 0]))
    assert img[0, 0] == RED
    assert img[0, 1] == BLACK


def test_empty_image_allowed():
    img = load(b"P6 0 0 255 ")
    assert (img.width, img.height) == (0, 0)


def test_maximum_size_allowed():
    img = load(f"P6 {MAX_IMAGE_SIZE} 0 255 ".encode())
    assert img.width == MAX_IMAGE_SIZE


@pytest.mark.parametrize(
    "data, kind",
    [
        (b"P5 1 1 255 ", PpmErrorKind.INCORRECT_FORMAT),
        (f"P6 {MAX_IMAGE_SIZE + 1} 1 255 ".encode(), PpmErrorKind.VIOLATION_LIMITS),
        (b"P6 1 -1 255 ", PpmErrorKind.VIOLATION_LIMITS),
        (b"P3 1 1 65535 ", PpmErrorKind.VIOLATION_LIMITS),
        (b"P6 1 1 255x", PpmErrorKind.INCORRECT_HEADER),
        (b"P6 1 1", PpmErrorKind.BAD_STREAM),
        (b"P6 1 1 255", PpmErrorKind.BAD_STREAM),
        (b"P6 a 1 255 ", PpmErrorKind.BAD_STREAM),
        (b"", PpmErrorKind.BAD_STREAM),
    ],
)
def test_load_errors(data, kind):
    with pytest.raises(PpmError) as info:
        load(io.BytesIO(data))
    assert info.value.kind is kind


def test_load_from_closed_stream():
    buf = io.BytesIO(b"P6 1 1 255 abc")
    buf.close()
    with pytest.raises(PpmError) as info:
        load(buf)
    assert info.value.kind is PpmErrorKind.BAD_STREAM


def test_dump_to_closed_stream():
    buf = io.BytesIO()
    buf.close()
    with pytest.raises(PpmError) as info:
        dump(buf, _sample(), PpmFormat.P6)
    assert info.value.kind is PpmErrorKind.BAD_STREAM


def test_file_round_trip(tmp_path):
    path = tmp_path / "out.ppm"
    with path.open("wb") as dst:
        dump(dst, _sample(), PpmFormat.P3)
    with path.open("rb") as src:
        assert load(src) == _sample()
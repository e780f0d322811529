import pytest

from rasterkit.canvas import Canvas
from rasterkit.primitives import BLACK, BLUE, GREEN, RED, Color


def _distinct(width, height):
    img = Canvas(width, height)
    img.load_bytes(bytes(v % 256 for v in range(width * height * 3)))
    return img


def test_new_canvas_is_filled():
    img = Canvas(4, 3, GREEN)
    assert (img.width, img.height) == (4, 3)
    assert all(p == GREEN for p in img)
    assert len(list(img)) == 12


def test_default_canvas_is_empty_and_black():
    assert Canvas().to_bytes() == b""
    assert all(p == BLACK for p in Canvas(2, 2))


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 2)


def test_set_and_get_pixel():
    img = Canvas(5, 4)
    img[3, 4] = RED
    assert img[3, 4] == RED
    assert img[0, 0] == BLACK


@pytest.mark.parametrize("key", [(4, 0), (0, 5), (-1, 0), (0, -1)])
def test_out_of_bounds_access(key):
    img = Canvas(5, 4)
    with pytest.raises(IndexError):
        img[key]
    with pytest.raises(IndexError):
        img[key] = RED
    assert img == Canvas(5, 4)
    assert all(p == BLACK for p in img)
    assert (img.width, img.height) == (5, 4)


def test_equality_compares_buffers_only():
    assert Canvas(2, 3) == Canvas(3, 2)
    assert not (Canvas(2, 2) == Canvas(1, 1))
    assert not (Canvas(1, 1, RED) == Canvas(1, 1, BLUE))


def test_fill_replaces_every_pixel():
    img = _distinct(3, 3)
    img.fill(BLUE)
    assert img == Canvas(3, 3, BLUE)


def test_resize_keeps_prefix_and_pads_black():
    img = Canvas(2, 2, RED)
    img.resize(3, 2)
    assert (img.width, img.height) == (3, 2)
    pixels = list(img)
    assert pixels[:4] == [RED] * 4
    assert pixels[4:] == [BLACK] * 2


def test_resize_shrinks():
    img = _distinct(3, 3)
    before = list(img)
    img.resize(2, 2)
    assert list(img) == before[:4]


def test_transpose_swaps_coordinates():
    img = _distinct(3, 2)
    original = _distinct(3, 2)
    img.transpose()
    assert (img.width, img.height) == (2, 3)
    for row in range(original.height):
        for col in range(original.width):
            assert img[col, row] == original[row, col]


def test_transpose_twice_is_identity():
    img = _distinct(4, 3)
    img.transpose()
    img.transpose()
    assert img == _distinct(4, 3)
    assert (img.width, img.height) == (4, 3)


def test_bytes_round_trip():
    data = bytes(range(12))
    img = Canvas(2, 2)
    img.load_bytes(data)
    assert img.to_bytes() == data
    assert img[0, 0] == Color(0, 1, 2)


def test_partial_load_bytes_changes_prefix_only():
    img = Canvas(2, 1, RED)
    img.load_bytes(bytes([0, 0, 255]))
    assert img[0, 0] == BLUE
    assert img[0, 1] == RED


def test_load_bytes_too_long():
    with pytest.raises(ValueError):
        Canvas(1, 1).load_bytes(bytes(4))
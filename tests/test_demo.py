from pathlib import Path

import pytest

from rasterkit import demo, ppm
from rasterkit.canvas import Canvas
from rasterkit.ppm import PpmError, PpmErrorKind, PpmFormat
from rasterkit.primitives import BLACK, BLUE, Color


def _load(path: Path) -> Canvas:
    with path.open("rb") as src:
        return ppm.load(src)


@pytest.fixture
def source_image(tmp_path):
    img = Canvas(4, 3)
    img[0, 0] = Color(10, 20, 30)
    img[2, 3] = Color(200, 100, 50)
    path = tmp_path / "input.ppm"
    with path.open("wb") as dst:
        ppm.dump(dst, img, PpmFormat.P3)
    return path, img


def test_dump_load_compare_round_trip(tmp_path, source_image):
    path, img = source_image
    out_dir = tmp_path / "out"
    assert demo.dump_load_compare(path, out_dir) is True
    written = _load(out_dir / "canvas-dump-load-test-out.ppm")
    assert written == img
    assert (written.width, written.height) == (4, 3)


def test_dump_load_compare_missing_source(tmp_path):
    with pytest.raises(PpmError) as info:
        demo.dump_load_compare(tmp_path / "absent.ppm", tmp_path / "out")
    assert info.value.kind is PpmErrorKind.BAD_STREAM


def test_dump_load_compare_bad_format(tmp_path):
    path = tmp_path / "bad.ppm"
    path.write_bytes(b"P5 1 1 255 \x00\x00\x00")
    with pytest.raises(PpmError) as info:
        demo.dump_load_compare(path, tmp_path / "out")
    assert info.value.kind is PpmErrorKind.INCORRECT_FORMAT


def test_draw_lines_is_deterministic(tmp_path):
    first = demo.draw_lines(tmp_path / "a")
    second = demo.draw_lines(tmp_path / "b")
    assert first.name == "line-render.ppm"
    assert first.read_bytes() == second.read_bytes()
    img = _load(first)
    assert (img.width, img.height) == (480, 270)
    assert any(pixel != BLACK for pixel in img)


def test_draw_triangle_uses_only_blue(tmp_path):
    img = _load(demo.draw_triangle(tmp_path))
    assert (img.width, img.height) == (1080, 1080)
    colours = set(img)
    assert colours <= {BLACK, BLUE}
    assert BLUE in colours


def test_draw_triangle_with_indices_draws_horizontal_edges(tmp_path):
    img = _load(demo.draw_triangle_with_indices(tmp_path))
    colour = Color(0, 20, 240)
    assert all(img[10, col] == colour for col in range(10, 601))
    assert all(img[300, col] == colour for col in range(10, 601))
    assert img[150, 320] == BLACK
    assert set(img) == {BLACK, colour}


def test_rasterize_triangle_fills_interior(tmp_path):
    img = _load(demo.rasterize_triangle(tmp_path))
    assert (img.width, img.height) == (640, 360)
    assert img[153, 270] != BLACK
    assert img[0, 0] == BLACK
    assert img[350, 630] == BLACK


def test_rasterize_indexed_triangles_leaves_gap(tmp_path):
    img = _load(demo.rasterize_indexed_triangles(tmp_path))
    assert img[180, 100] != BLACK
    assert img[180, 560] != BLACK
    assert img[60, 320] == BLACK
    assert img[20, 320] == BLACK


def test_black_white_triangle_is_grey(tmp_path):
    path = demo.black_white_triangle(tmp_path)
    assert path.read_bytes().startswith(b"P3 640 360 255 ")
    img = _load(path)
    assert all(p.r == p.g == p.b for p in img)
    assert any(p != BLACK for p in img)
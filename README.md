# rasterkit

A small software rasterizer in plain Python, with no dependencies beyond the
standard library. It draws into an in-memory RGB canvas and reads and writes
PPM images.

## Modules

- `rasterkit.primitives`: frozen dataclasses `Color` (8-bit `r`, `g`, `b`;
  out-of-range channels raise `ValueError`), `Vec2` (supports `+`), `Vec3`
  and `Vertex` (`pos`, `rgb`, `tpos`). `make_vertex(x, y, r, g, b, tx, ty)`
  builds a vertex from flat values; `combine(lhs, rhs, func)` applies a
  function pairwise to two equally long sequences. Named colours `BLACK`,
  `WHITE`, `RED`, `GREEN` and `BLUE` are provided.
- `rasterkit.canvas`: `Canvas(width, height, fill_color)`, a row-major grid
  of colours indexed as `canvas[row, col]` (out-of-range indices raise
  `IndexError`). It has `fill`, `resize` (keeps the leading pixels and pads
  with black), `transpose`, `to_bytes` and `load_bytes` for packed RGB24
  data. Two canvases compare equal when their pixel lists are equal.
- `rasterkit.ppm`: `load(src)` reads a P3 or P6 image from a binary stream or
  a bytes object and returns a `Canvas`; `dump(dst, img, fmt)` writes one in
  `PpmFormat.P3` or `PpmFormat.P6`. Only a maximum colour value of 255 and
  sides of at most 4096 pixels are accepted. Failures raise `PpmError`, whose
  `kind` is a `PpmErrorKind`; `describe(kind)` returns its message.
- `rasterkit.shaders`: the `Shader` base class and `PassThroughShader`,
  `TextureShader`, `BlackWhiteShader`, plus the mouse-position effects
  `FunnyMomentShader`, `MagnifierShader` and `BlurShader`. The texture-reading
  shaders take their texture in `buf` and raise `ValueError` without one.
- `rasterkit.line_render`: `LineRenderer`, which clears the canvas, computes
  Bresenham lines (`line`), interpolates vertices along a span
  (`vertex_line`), draws coloured segments (`draw`) and shades vertices
  through its `program` (`draw_vertices`, skipping those off the canvas).
  `interpolate_position` and `interpolate_vertex` are module functions.
- `rasterkit.triangle_render`: `TriangleRenderer`, a `LineRenderer` that
  draws triangle outlines (`draw_triangles`, `draw_indexed`), fills triangles
  (`rasterize`, `rasterize_indexed`, `rasterize_triangle`, and the simpler
  `rasterize_naive`), and returns the filling vertices of a triangle
  (`triangle_vertices`). Indexed rasterisation passes corners through the
  shader's `vertex_shader`.
- `rasterkit.hello`: `hello(stream)` prints `Hello, World!`.
- `rasterkit.demo`: the sample scenes behind `rasterkit-demo`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from rasterkit.canvas import Canvas
from rasterkit.primitives import make_vertex
from rasterkit.triangle_render import TriangleRenderer
from rasterkit import ppm

img = Canvas(640, 360)
renderer = TriangleRenderer(img)
renderer.clear()
renderer.rasterize([
    make_vertex(10, 10, 255, 0, 0, 0, 0),
    make_vertex(600, 150, 0, 255, 0, 0, 0),
    make_vertex(200, 300, 0, 0, 255, 0, 0),
])

with open("triangle.ppm", "wb") as dst:
    ppm.dump(dst, img, ppm.PpmFormat.P6)
```

## Commands

`rasterkit-demo [source] [output_dir]` renders sample images (random lines
from a fixed seed, a spiral of triangle outlines, indexed outlines, filled
and indexed filled triangles, and a black-and-white shader scene) as PPM
files into `output_dir` (by default `04-0-output-images`, created if
missing). It first loads the PPM image `source`, writes it back as P6,
reads that again and prints `dump_load_compare SUCCESS` or
`dump_load_compare FAIL`; a missing or unreadable source gives `FAIL` and
the other scenes are still drawn. It exits with status 1 if a scene cannot
be written.

```
rasterkit-demo path/to/image.ppm out
```

`rasterkit-hello` prints `Hello, World!` and exits with status 0, or 1 if
the output could not be written:

```
rasterkit-hello
```

## What it does not do

Everything is drawn into memory and saved as PPM files. There is no window,
on-screen display or event loop: the mouse-driven shaders only read the
`mouse_x`, `mouse_y`, `radius` and similar fields you set on them.
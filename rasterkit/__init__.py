"""A small software rasterizer: canvases, PPM images, lines, triangles and shaders."""

__version__ = "0.1.0"
__all__ = [
    "primitives",
    "canvas",
    "ppm",
    "shaders",
    "line_render",
    "triangle_render",
    "hello",
    "demo",
]
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterkit"
version = "0.1.0"
description = "A small software rasterizer: canvases, PPM images, lines, triangles and fragment shaders"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "ppm", "software-rendering", "triangles", "shaders", "bresenham"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rasterkit-demo = "rasterkit.demo:main"
rasterkit-hello = "rasterkit.hello:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterkit"]

[tool.pytest.ini_options]
addopts = "-ra"

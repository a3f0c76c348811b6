[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vgengine"
version = "0.1.0"
description = "A small software 3D renderer: vector and matrix math, frustum clipping, rasterization into an in-memory framebuffer, and core utilities."
requires-python = ">=3.10"
dependencies = []
keywords = ["software-renderer", "rasterizer", "3d", "graphics", "quaternion", "framebuffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vgengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

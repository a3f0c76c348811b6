"""Software 3D renderer: math, frustum clipping, rasterization and core utilities."""

__version__ = "0.1.0"
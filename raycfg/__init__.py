"""Path-tracing renderer for libconfig-style scene files, writing binary PPM images."""

__version__ = "0.1.0"
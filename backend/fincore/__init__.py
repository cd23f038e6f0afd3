"""Temporal arithmetic and curve interpolation primitives."""

__version__ = "0.1.0"

"""Sliding-tile fifteen puzzle."""

__version__ = "0.1.0"

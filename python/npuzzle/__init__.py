"""Sliding-tile (N-puzzle) solver core."""

__version__ = "1.0.0"

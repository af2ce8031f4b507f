"""Convex hull area calculation, an interactive shell, an input generator and TCP servers."""

__version__ = "0.1.0"
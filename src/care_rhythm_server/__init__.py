"""Infant-care activity rhythm heatmaps over a 24-hour cycle."""

__version__ = "0.1.0"

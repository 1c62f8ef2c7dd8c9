"""Structural statistics for undirected social network edge lists."""

__version__ = "0.1.0"

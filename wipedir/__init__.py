"""Wipedir - find directories by name pattern and delete them after confirmation."""

__version__ = "1.0.0"

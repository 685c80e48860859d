"""Shortest routes between islands connected by bridges, read from a text map."""

__version__ = "0.1.0"
__all__ = ["__version__"]
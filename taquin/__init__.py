"""Sliding-tile picture puzzle: board logic, menu layouts and a pygame front end."""

__version__ = "1.0.0"
__all__ = ["__version__"]
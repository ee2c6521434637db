"""A small raycasting maze explorer with a grid editor, built on pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]
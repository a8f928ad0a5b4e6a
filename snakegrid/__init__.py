"""A grid-based snake game with a persistent high score."""

__version__ = "0.1.0"
__all__ = ["__version__"]
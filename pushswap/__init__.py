"""Two-stack integer sorting with push, swap and rotate instructions."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""A Tk image viewer with a searchable thumbnail grid and a slideshow."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Inspect simple PDF files: page count, page fonts and page images."""

__version__ = "0.1.0"
__all__ = ["__version__"]
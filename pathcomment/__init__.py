"""Prepend relative file paths as comments to source files."""

__version__ = "0.1.1"
__all__ = ["__version__"]
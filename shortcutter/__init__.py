"""Fuzzy-searchable terminal picker for zsh keyboard shortcuts, with themes."""

__version__ = "0.1.0"
__all__ = ["__version__"]
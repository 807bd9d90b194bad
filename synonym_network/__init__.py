"""Synonym connectivity explorer built on a word-indexed graph."""

from .version import __version__

__all__ = ["__version__"]

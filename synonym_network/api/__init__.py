"""Read-only HTTP adapter over the synonym engine."""

from .app import create_app

__all__ = [
    "create_app",
]

"""Version information for the Synonym Network server."""

__version__ = "0.3.0"

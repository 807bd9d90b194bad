"""Custom exceptions for synonym graph operations."""


class SynonymNetworkError(Exception):
    """Base exception for synonym network operations."""
    pass


class SourceLoadError(SynonymNetworkError):
    """Raised when an adjacency or dictionary source cannot be loaded."""
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load source '{path}': {reason}")


class VertexOutOfRangeError(SynonymNetworkError, ValueError):
    """Raised when a vertex id is outside [0, V)."""
    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} is not between 0 and {vertex_count - 1}")

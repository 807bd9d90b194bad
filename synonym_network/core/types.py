"""Type definitions for the synonym graph."""

from typing import TypedDict


class PathStatistics(TypedDict):
    """Node and edge counts for a path."""
    nodes: int
    edges: int


class PathInfo(TypedDict):
    """Everything a caller needs to display one shortest path."""
    path: list[str]
    connection_level: int
    path_synonyms: dict[str, set[str]]
    word_definitions: dict[str, str]


class GraphStats(TypedDict):
    """Size of a loaded engine."""
    vertices: int
    edges: int
    definitions: int

"""Breadth-first shortest-path queries over the synonym graph."""

from collections import deque

from .constants import NO_CONNECTION
from .symbol_graph import SymbolGraph


class PathFinder:
    """Shortest-connection queries, translated back to words."""

    def __init__(self, symbol_graph: SymbolGraph):
        self.symbol_graph = symbol_graph

    def find_path(self, start: str, end: str) -> list[str] | None:
        """
        Shortest path from start to end, both ends included.
        Returns None if either word is unknown or end is unreachable.
        """
        source = self.symbol_graph.index_of(start)
        target = self.symbol_graph.index_of(end)
        if source is None or target is None:
            return None

        edge_to = self._search(source, target)
        if target not in edge_to:
            return None

        vertices = [target]
        while vertices[-1] != source:
            vertices.append(edge_to[vertices[-1]])
        vertices.reverse()
        return [self.symbol_graph.name_of(v) for v in vertices]

    def connection_level(self, start: str, end: str) -> int:
        """Edge count of the shortest path, or NO_CONNECTION (-1)."""
        if not self.symbol_graph.contains(start) or not self.symbol_graph.contains(end):
            return NO_CONNECTION
        if start == end:
            return 0

        path = self.find_path(start, end)
        if path is None:
            return NO_CONNECTION
        return len(path) - 1

    def are_connected(self, start: str, end: str) -> bool:
        return self.find_path(start, end) is not None

    def _search(self, source: int, target: int) -> dict[int, int]:
        """BFS from source, stopping once target is reached. Returns parent links."""
        graph = self.symbol_graph.graph
        edge_to = {source: source}
        queue = deque([source])
        while queue and target not in edge_to:
            v = queue.popleft()
            for w in graph.neighbors(v):
                if w not in edge_to:
                    edge_to[w] = v
                    queue.append(w)
        return edge_to

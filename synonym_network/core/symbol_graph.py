"""Word-indexed undirected graph built from a delimited adjacency source."""

import logging
from pathlib import Path
from typing import Iterable

from .constants import DEFAULT_DELIMITER, SOURCE_ENCODING
from .exceptions import SourceLoadError, VertexOutOfRangeError
from .utils import edge_key, split_fields

logger = logging.getLogger(__name__)


class SymbolIndex:
    """Bijection between words and dense vertex ids."""

    def __init__(self, words: Iterable[str]):
        self._keys: tuple[str, ...] = tuple(words)
        self._ids: dict[str, int] = {word: i for i, word in enumerate(self._keys)}
        if len(self._ids) != len(self._keys):
            raise ValueError("SymbolIndex words must be unique")

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, word: object) -> bool:
        return word in self._ids

    def contains(self, word: str) -> bool:
        return word in self._ids

    def index_of(self, word: str) -> int | None:
        """Vertex id for a word, or None if the word is unknown."""
        return self._ids.get(word)

    def name_of(self, vertex: int) -> str:
        """Word owning a vertex id. Raises VertexOutOfRangeError if invalid."""
        if vertex < 0 or vertex >= len(self._keys):
            raise VertexOutOfRangeError(vertex, len(self._keys))
        return self._keys[vertex]

    @property
    def words(self) -> tuple[str, ...]:
        return self._keys


class UndirectedGraph:
    """Read-only adjacency lists over vertex ids."""

    def __init__(self, adjacency: Iterable[Iterable[int]]):
        self._adj: tuple[tuple[int, ...], ...] = tuple(tuple(neighbors) for neighbors in adjacency)
        self._edge_count = sum(len(neighbors) for neighbors in self._adj) // 2

    @property
    def vertex_count(self) -> int:
        return len(self._adj)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        self._validate(vertex)
        return self._adj[vertex]

    def degree(self, vertex: int) -> int:
        self._validate(vertex)
        return len(self._adj[vertex])

    def has_edge(self, u: int, v: int) -> bool:
        self._validate(u)
        self._validate(v)
        return v in self._adj[u]

    def _validate(self, vertex: int):
        if vertex < 0 or vertex >= len(self._adj):
            raise VertexOutOfRangeError(vertex, len(self._adj))


class SymbolGraph:
    """
    Undirected graph whose vertices are identified by word.

    Built in two passes over the source records:
    - pass 1 assigns ids to unseen tokens in first-occurrence order
    - pass 2 connects each record's first field to every other field,
      recording each unordered pair at most once
    """

    def __init__(self, index: SymbolIndex, graph: UndirectedGraph):
        if len(index) != graph.vertex_count:
            raise ValueError(
                f"index has {len(index)} words but graph has {graph.vertex_count} vertices"
            )
        self.index = index
        self.graph = graph

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        delimiter: str = DEFAULT_DELIMITER,
        sort_neighbors: bool = False,
    ) -> "SymbolGraph":
        records = [split_fields(line, delimiter) for line in lines]
        records = [record for record in records if record]

        # Pass 1: index every token
        ids: dict[str, int] = {}
        for record in records:
            for token in record:
                if token not in ids:
                    ids[token] = len(ids)
        index = SymbolIndex(ids)

        # Pass 2: connect first field to the rest, skipping seen pairs
        adjacency: list[list[int]] = [[] for _ in range(len(ids))]
        recorded: set[tuple[int, int]] = set()
        duplicates = 0
        for record in records:
            v = ids[record[0]]
            for token in record[1:]:
                w = ids[token]
                if v == w:
                    continue
                key = edge_key(v, w)
                if key in recorded:
                    duplicates += 1
                    continue
                recorded.add(key)
                adjacency[v].append(w)
                adjacency[w].append(v)

        if sort_neighbors:
            for neighbors in adjacency:
                neighbors.sort(key=index.name_of)

        logger.debug(f"Skipped {duplicates} duplicate edges")
        return cls(index, UndirectedGraph(adjacency))

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        delimiter: str = DEFAULT_DELIMITER,
        sort_neighbors: bool = False,
    ) -> "SymbolGraph":
        """Load a graph from a text file. Raises SourceLoadError on failure."""
        path = Path(path)
        try:
            with open(path, encoding=SOURCE_ENCODING) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read adjacency source {path}: {e}")
            raise SourceLoadError(str(path), str(e)) from e

        symbol_graph = cls.from_lines(lines, delimiter=delimiter, sort_neighbors=sort_neighbors)
        if symbol_graph.vertex_count == 0:
            raise SourceLoadError(str(path), "source contains no words")

        logger.info(
            f"Loaded synonym graph from {path}: "
            f"{symbol_graph.vertex_count} vertices, {symbol_graph.edge_count} edges"
        )
        return symbol_graph

    @property
    def vertex_count(self) -> int:
        return self.graph.vertex_count

    @property
    def edge_count(self) -> int:
        return self.graph.edge_count

    def contains(self, word: str) -> bool:
        return self.index.contains(word)

    def index_of(self, word: str) -> int | None:
        return self.index.index_of(word)

    def name_of(self, vertex: int) -> str:
        return self.index.name_of(vertex)

    def neighbors_of(self, word: str) -> list[str] | None:
        """Adjacent words in graph order, or None if the word is unknown."""
        vertex = self.index.index_of(word)
        if vertex is None:
            return None
        return [self.index.name_of(w) for w in self.graph.neighbors(vertex)]

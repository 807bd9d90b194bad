"""Depth-bounded random walks with whole-attempt retries."""

import logging
import random
from dataclasses import dataclass
from enum import Enum

from .constants import DEFAULT_MAX_WALK_ATTEMPTS
from .symbol_graph import SymbolGraph

logger = logging.getLogger(__name__)


class WalkStatus(str, Enum):
    FOUND = "found"
    UNKNOWN_WORD = "unknown_word"
    INVALID_DEPTH = "invalid_depth"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class WalkResult:
    """Outcome of a random walk request."""
    status: WalkStatus
    path: list[str] | None = None
    attempts: int = 0

    @property
    def found(self) -> bool:
        return self.status is WalkStatus.FOUND


class RandomWalker:
    """
    Generates simple paths of exactly `depth` edges from a start word.

    Each attempt extends the path by a uniformly chosen unvisited neighbor of
    its tail. An attempt that hits a dead end is discarded whole; there is no
    mid-walk backtracking. After `max_attempts` failures the walk is exhausted.
    """

    def __init__(
        self,
        symbol_graph: SymbolGraph,
        max_attempts: int = DEFAULT_MAX_WALK_ATTEMPTS,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self.symbol_graph = symbol_graph
        self.max_attempts = max_attempts
        self.rng = rng if rng is not None else random.Random(seed)

    def walk(self, start: str, depth: int) -> WalkResult:
        start_vertex = self.symbol_graph.index_of(start)
        if start_vertex is None:
            return WalkResult(WalkStatus.UNKNOWN_WORD)
        if depth < 1:
            return WalkResult(WalkStatus.INVALID_DEPTH)

        for attempt in range(1, self.max_attempts + 1):
            vertices = self._attempt(start_vertex, depth)
            if vertices is not None:
                path = [self.symbol_graph.name_of(v) for v in vertices]
                return WalkResult(WalkStatus.FOUND, path, attempt)

        logger.debug(f"Random walk from '{start}' exhausted {self.max_attempts} attempts at depth {depth}")
        return WalkResult(WalkStatus.EXHAUSTED, attempts=self.max_attempts)

    def _attempt(self, start_vertex: int, depth: int) -> list[int] | None:
        graph = self.symbol_graph.graph
        vertices = [start_vertex]
        visited = {start_vertex}
        for _ in range(depth):
            candidates = [w for w in graph.neighbors(vertices[-1]) if w not in visited]
            if not candidates:
                return None
            choice = self.rng.choice(candidates)
            vertices.append(choice)
            visited.add(choice)
        return vertices

"""Synonym graph engine: build-once facade over the query components."""

import logging
import os
import random
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .constants import (
    DEFAULT_DELIMITER,
    DEFAULT_MAX_WALK_ATTEMPTS,
    DEFAULT_SOURCE_PATH,
    DEFAULT_SYNONYM_CAP,
)
from .definitions import DefinitionStore
from .paths import PathFinder
from .sampler import SynonymSampler
from .symbol_graph import SymbolGraph
from .types import GraphStats, PathInfo, PathStatistics
from .walker import RandomWalker, WalkResult

logger = logging.getLogger(__name__)


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


@dataclass
class EngineConfig:
    """Configuration for building a synonym engine."""
    source_path: Path = Path(DEFAULT_SOURCE_PATH)
    delimiter: str = DEFAULT_DELIMITER
    dictionary_path: Path | None = None
    synonym_cap: int = DEFAULT_SYNONYM_CAP
    max_walk_attempts: int = DEFAULT_MAX_WALK_ATTEMPTS
    sort_neighbors: bool = False
    random_seed: int | None = None

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError if any setting cannot build an engine."""
        if not self.delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if self.synonym_cap < 0:
            raise ValueError(f"synonym_cap must be >= 0, got {self.synonym_cap}")
        if self.max_walk_attempts < 1:
            raise ValueError(f"max_walk_attempts must be >= 1, got {self.max_walk_attempts}")

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Read SYNNET_* environment variables, falling back to defaults.

        Raises ValueError for a malformed number or an empty delimiter.
        """
        dictionary_path = os.getenv("SYNNET_DICTIONARY_PATH")
        return cls(
            source_path=Path(os.getenv("SYNNET_SOURCE_PATH", DEFAULT_SOURCE_PATH)),
            delimiter=os.getenv("SYNNET_DELIMITER", DEFAULT_DELIMITER),
            dictionary_path=Path(dictionary_path) if dictionary_path else None,
            synonym_cap=_env_int("SYNNET_SYNONYM_CAP", DEFAULT_SYNONYM_CAP),
            max_walk_attempts=_env_int("SYNNET_MAX_WALK_ATTEMPTS", DEFAULT_MAX_WALK_ATTEMPTS),
            sort_neighbors=_env_flag(os.getenv("SYNNET_SORT_NEIGHBORS", "false")),
            random_seed=_env_int("SYNNET_RANDOM_SEED", None),
        )


class SynonymEngine:
    """
    Read-only query surface over one loaded synonym graph.

    The graph and the definition store are never modified after
    construction, so one instance can serve any number of concurrent readers.
    """

    def __init__(
        self,
        symbol_graph: SymbolGraph,
        definitions: DefinitionStore | None = None,
        synonym_cap: int = DEFAULT_SYNONYM_CAP,
        max_walk_attempts: int = DEFAULT_MAX_WALK_ATTEMPTS,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        self.symbol_graph = symbol_graph
        self.definitions = definitions if definitions is not None else DefinitionStore.empty()
        self.path_finder = PathFinder(symbol_graph)
        self.sampler = SynonymSampler(symbol_graph, cap=synonym_cap)
        self.walker = RandomWalker(symbol_graph, max_attempts=max_walk_attempts, seed=seed, rng=rng)

    @classmethod
    def from_config(cls, config: EngineConfig) -> "SynonymEngine":
        """
        Load sources and build an engine.

        Raises SourceLoadError on failure, or ValueError for an invalid config.
        """
        config.validate()
        symbol_graph = SymbolGraph.from_file(
            config.source_path,
            delimiter=config.delimiter,
            sort_neighbors=config.sort_neighbors,
        )
        if config.dictionary_path is not None:
            definitions = DefinitionStore.from_file(config.dictionary_path)
        else:
            definitions = DefinitionStore.empty()

        return cls(
            symbol_graph,
            definitions,
            synonym_cap=config.synonym_cap,
            max_walk_attempts=config.max_walk_attempts,
            seed=config.random_seed,
        )

    # ========================================================================
    # Graph queries
    # ========================================================================

    def contains(self, word: str) -> bool:
        return self.symbol_graph.contains(word)

    def neighbors(self, word: str) -> list[str] | None:
        return self.symbol_graph.neighbors_of(word)

    def find_path(self, start: str, end: str) -> list[str] | None:
        return self.path_finder.find_path(start, end)

    def connection_level(self, start: str, end: str) -> int:
        return self.path_finder.connection_level(start, end)

    def are_connected(self, start: str, end: str) -> bool:
        return self.path_finder.are_connected(start, end)

    def path_synonyms(
        self, path: Sequence[str] | None, cap: int | None = None
    ) -> dict[str, set[str]] | None:
        return self.sampler.path_synonyms(path, cap)

    def walk(self, start: str, depth: int) -> WalkResult:
        return self.walker.walk(start, depth)

    def random_walk(self, start: str, depth: int) -> list[str] | None:
        """Path of exactly `depth` edges from start, or None."""
        return self.walker.walk(start, depth).path

    # ========================================================================
    # Definitions
    # ========================================================================

    def definition_of(self, word: str) -> str:
        return self.definitions.definition_of(word)

    def lookup_definition(self, word: str) -> str | None:
        return self.definitions.lookup(word)

    def definitions_for_path(self, path: Sequence[str] | None) -> dict[str, str]:
        if not path:
            return {}
        return {word: self.definitions.definition_of(word) for word in path}

    # ========================================================================
    # Composite views
    # ========================================================================

    def path_info(self, start: str, end: str) -> PathInfo | None:
        """Shortest path with its level, synonyms and definitions."""
        path = self.find_path(start, end)
        if path is None:
            return None
        return {
            "path": path,
            "connection_level": len(path) - 1,
            "path_synonyms": self.sampler.path_synonyms(path),
            "word_definitions": self.definitions_for_path(path),
        }

    @staticmethod
    def path_statistics(path: Sequence[str] | None) -> PathStatistics | None:
        if not path:
            return None
        return {"nodes": len(path), "edges": len(path) - 1}

    def stats(self) -> GraphStats:
        return {
            "vertices": self.symbol_graph.vertex_count,
            "edges": self.symbol_graph.edge_count,
            "definitions": len(self.definitions),
        }


class EngineHandle:
    """
    Holds the process-wide engine.

    The engine itself is immutable; updates build a new engine and swap the
    reference under a lock, so readers see either the old or the new one.
    """

    def __init__(self, engine: SynonymEngine, config: EngineConfig | None = None):
        self._lock = threading.Lock()
        self._engine = engine
        self.config = config

    @classmethod
    def from_config(cls, config: EngineConfig) -> "EngineHandle":
        return cls(SynonymEngine.from_config(config), config)

    def current(self) -> SynonymEngine:
        with self._lock:
            return self._engine

    def replace(self, engine: SynonymEngine) -> SynonymEngine:
        """Publish a new engine. Returns the one it replaced."""
        with self._lock:
            previous, self._engine = self._engine, engine
        stats = engine.stats()
        logger.info(f"Engine swapped: {stats['vertices']} vertices, {stats['edges']} edges")
        return previous

    def reload(self) -> SynonymEngine:
        """Rebuild from the stored config and publish the result."""
        if self.config is None:
            raise ValueError("EngineHandle has no config to reload from")
        engine = SynonymEngine.from_config(self.config)
        self.replace(engine)
        return engine

"""Core synonym graph components."""

from .types import PathInfo, PathStatistics, GraphStats
from .constants import *
from .exceptions import *
from .symbol_graph import SymbolIndex, UndirectedGraph, SymbolGraph
from .paths import PathFinder
from .sampler import SynonymSampler
from .walker import RandomWalker, WalkResult, WalkStatus
from .definitions import DefinitionStore
from .engine import EngineConfig, SynonymEngine, EngineHandle
from .utils import normalize_word, edge_key, split_fields

__all__ = [
    # Types
    "PathInfo",
    "PathStatistics",
    "GraphStats",
    # Constants
    "DEFAULT_DELIMITER",
    "SOURCE_ENCODING",
    "DEFAULT_SYNONYM_CAP",
    "DEFAULT_MAX_WALK_ATTEMPTS",
    "NO_CONNECTION",
    "NOT_IN_DICTIONARY",
    "DEFAULT_SOURCE_PATH",
    # Exceptions
    "SynonymNetworkError",
    "SourceLoadError",
    "VertexOutOfRangeError",
    # Classes
    "SymbolIndex",
    "UndirectedGraph",
    "SymbolGraph",
    "PathFinder",
    "SynonymSampler",
    "RandomWalker",
    "WalkResult",
    "WalkStatus",
    "DefinitionStore",
    "EngineConfig",
    "SynonymEngine",
    "EngineHandle",
    # Utils
    "normalize_word",
    "edge_key",
    "split_fields",
]

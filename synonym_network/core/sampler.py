"""Bounded neighbor sampling for words on a path."""

from typing import Sequence

from .constants import DEFAULT_SYNONYM_CAP
from .symbol_graph import SymbolGraph


class SynonymSampler:
    """Collects up to `cap` off-path neighbors for each word of a path."""

    def __init__(self, symbol_graph: SymbolGraph, cap: int = DEFAULT_SYNONYM_CAP):
        if cap < 0:
            raise ValueError(f"synonym cap must be >= 0, got {cap}")
        self.symbol_graph = symbol_graph
        self.cap = cap

    def path_synonyms(
        self, path: Sequence[str] | None, cap: int | None = None
    ) -> dict[str, set[str]] | None:
        """
        Map each path word to a set of its neighbors not on the path.

        Neighbors are taken in graph order until `cap` are collected.
        Words unknown to the graph map to an empty set.
        """
        if path is None:
            return None
        if cap is None:
            cap = self.cap
        elif cap < 0:
            raise ValueError(f"synonym cap must be >= 0, got {cap}")

        on_path = set(path)
        synonyms: dict[str, set[str]] = {}
        for word in path:
            collected: set[str] = set()
            for neighbor in self.symbol_graph.neighbors_of(word) or ():
                if len(collected) >= cap:
                    break
                if neighbor not in on_path:
                    collected.add(neighbor)
            synonyms[word] = collected
        return synonyms

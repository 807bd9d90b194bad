"""Shared test fixtures for the synonym network."""

import pytest

from synonym_network.core import DefinitionStore, EngineConfig, SymbolGraph, SynonymEngine

SCENARIO_LINES = [
    "happy,glad,joyful",
    "joyful,elated",
]

# a-b, a-c, b-d, c-d, c-e, e-f form one component; g-h another; x is isolated
SMALL_LINES = [
    "a,b,c",
    "b,d",
    "c,d,e",
    "e,f",
    "g,h",
    "x",
]

SCENARIO_DICTIONARY = (
    'happy,"Feeling or showing pleasure, or contentment."\n'
    "elated,Ecstatically happy.\n"
)


@pytest.fixture
def scenario_graph():
    return SymbolGraph.from_lines(SCENARIO_LINES)


@pytest.fixture
def small_graph():
    return SymbolGraph.from_lines(SMALL_LINES)


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "synonyms.txt"
    path.write_text("\n".join(SCENARIO_LINES) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def dictionary_file(tmp_path):
    path = tmp_path / "dict.csv"
    path.write_text(SCENARIO_DICTIONARY, encoding="utf-8")
    return path


@pytest.fixture
def engine_config(source_file, dictionary_file):
    return EngineConfig(source_path=source_file, dictionary_path=dictionary_file, random_seed=42)


@pytest.fixture
def scenario_engine(scenario_graph):
    definitions = DefinitionStore({"happy": "Feeling or showing pleasure, or contentment."})
    return SynonymEngine(scenario_graph, definitions, seed=42)

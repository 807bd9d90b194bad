"""Tests for the command-line entry point."""

import pytest

from synonym_network.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SYNNET_SOURCE_PATH", "SYNNET_DICTIONARY_PATH", "SYNNET_RANDOM_SEED",
                 "SYNNET_DELIMITER", "SYNNET_SYNONYM_CAP", "SYNNET_MAX_WALK_ATTEMPTS"):
        monkeypatch.delenv(name, raising=False)


class TestCli:
    def test_path(self, source_file, capsys):
        assert main(["--source", str(source_file), "path", "Happy", "elated"]) == 0
        out = capsys.readouterr().out
        assert "Path: happy -> joyful -> elated" in out
        assert "Connection Level: 2" in out

    def test_path_not_found(self, source_file, capsys):
        assert main(["--source", str(source_file), "path", "happy", "xyzzy"]) == 1
        assert "No path found" in capsys.readouterr().out

    def test_walk(self, source_file, capsys):
        assert main(["--source", str(source_file), "--seed", "5", "walk", "happy", "2"]) == 0
        assert "Path: happy -> joyful -> elated" in capsys.readouterr().out

    def test_walk_exhausted(self, source_file, capsys):
        assert main(["--source", str(source_file), "walk", "glad", "4"]) == 1
        assert "exhausted" in capsys.readouterr().out

    def test_define(self, source_file, dictionary_file, capsys):
        args = ["--source", str(source_file), "--dictionary", str(dictionary_file)]
        assert main(args + ["define", "elated"]) == 0
        assert "Ecstatically happy." in capsys.readouterr().out
        assert main(args + ["define", "glad"]) == 0
        assert "not currently in our dictionary" in capsys.readouterr().out

    def test_synonyms(self, source_file, capsys):
        assert main(["--source", str(source_file), "synonyms", "happy", "elated"]) == 0
        assert "happy: glad" in capsys.readouterr().out

    def test_neighbors(self, source_file, capsys):
        assert main(["--source", str(source_file), "neighbors", "joyful"]) == 0
        out = capsys.readouterr().out
        assert "   happy" in out
        assert "   elated" in out
        assert main(["--source", str(source_file), "neighbors", "xyzzy"]) == 1

    def test_stats(self, source_file, capsys):
        assert main(["--source", str(source_file), "stats"]) == 0
        out = capsys.readouterr().out
        assert "Vertices: 4" in out
        assert "Edges: 3" in out

    def test_missing_source(self, tmp_path, capsys):
        assert main(["--source", str(tmp_path / "missing.txt"), "stats"]) == 2
        assert "Error loading sources" in capsys.readouterr().err

    def test_empty_delimiter_env(self, source_file, monkeypatch, capsys):
        monkeypatch.setenv("SYNNET_DELIMITER", "")
        assert main(["--source", str(source_file), "stats"]) == 2
        assert "delimiter" in capsys.readouterr().err

    def test_non_integer_synonym_cap_env(self, source_file, monkeypatch, capsys):
        monkeypatch.setenv("SYNNET_SYNONYM_CAP", "many")
        assert main(["--source", str(source_file), "stats"]) == 2
        assert "SYNNET_SYNONYM_CAP" in capsys.readouterr().err

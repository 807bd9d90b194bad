"""Tests for the read-only HTTP adapter."""

import logging

import pytest
from fastapi.testclient import TestClient

from synonym_network.api import create_app
from synonym_network.core import NOT_IN_DICTIONARY, EngineHandle, SourceLoadError, SynonymEngine


@pytest.fixture
def client(engine_config):
    handle = EngineHandle.from_config(engine_config)
    with TestClient(create_app(handle)) as client:
        yield client


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["vertices"] == 4
        assert data["edges"] == 3
        assert data["definitions"] == 2


class TestGraphEndpoints:
    def test_exists(self, client):
        assert client.get("/api/graph/exists", params={"word": "happy"}).json() is True
        assert client.get("/api/graph/exists", params={"word": "  HAPPY "}).json() is True
        assert client.get("/api/graph/exists", params={"word": "xyzzy"}).json() is False

    def test_definition(self, client):
        response = client.get("/api/graph/definition", params={"word": "elated"})
        assert response.status_code == 200
        assert response.json() == "Ecstatically happy."

    def test_definition_not_found(self, client):
        response = client.get("/api/graph/definition", params={"word": "glad"})
        assert response.status_code == 404
        assert response.json()["detail"] == "not found"

    def test_neighbors(self, client):
        assert client.get("/api/graph/neighbors", params={"word": "happy"}).json() == ["glad", "joyful"]
        assert client.get("/api/graph/neighbors", params={"word": "xyzzy"}).status_code == 404

    def test_definitions_for_path(self, client):
        response = client.post("/api/graph/definitions", json=["happy", "glad"])
        assert response.status_code == 200
        data = response.json()
        assert data["happy"].startswith("Feeling")
        assert data["glad"] == NOT_IN_DICTIONARY

    def test_synonyms_for_path(self, client):
        response = client.post("/api/graph/synonyms", json=["happy"], params={"cap": 1})
        assert response.status_code == 200
        assert response.json() == {"happy": ["glad"]}

    def test_synonyms_rejects_negative_cap(self, client):
        response = client.post("/api/graph/synonyms", json=["happy"], params={"cap": -1})
        assert response.status_code == 422

    def test_statistics(self, client):
        response = client.post("/api/graph/statistics", json=["happy", "joyful", "elated"])
        assert response.json() == {"nodes": 3, "edges": 2}
        assert client.post("/api/graph/statistics", json=[]).status_code == 404


class TestPathEndpoints:
    def test_shortest(self, client):
        response = client.get("/api/path/shortest", params={"word1": "Happy", "word2": "elated"})
        assert response.status_code == 200
        assert response.json() == ["happy", "joyful", "elated"]

    def test_shortest_unknown(self, client):
        response = client.get("/api/path/shortest", params={"word1": "happy", "word2": "xyzzy"})
        assert response.status_code == 404

    def test_level(self, client):
        assert client.get("/api/path/level", params={"word1": "happy", "word2": "elated"}).json() == 2
        assert client.get("/api/path/level", params={"word1": "happy", "word2": "happy"}).json() == 0
        response = client.get("/api/path/level", params={"word1": "happy", "word2": "xyzzy"})
        assert response.status_code == 404

    def test_path_synonyms(self, client):
        response = client.get("/api/path/synonyms", params={"word1": "happy", "word2": "elated"})
        assert response.json() == {"happy": ["glad"], "joyful": [], "elated": []}

    def test_connected(self, client):
        assert client.get("/api/path/connected", params={"word1": "glad", "word2": "elated"}).json() is True
        assert client.get("/api/path/connected", params={"word1": "glad", "word2": "xyzzy"}).json() is False

    def test_info(self, client):
        response = client.get("/api/path/info", params={"word1": "happy", "word2": "elated"})
        assert response.status_code == 200
        data = response.json()
        assert data["path"] == ["happy", "joyful", "elated"]
        assert data["connectionLevel"] == 2
        assert data["pathSynonyms"]["happy"] == ["glad"]
        assert data["wordDefinitions"]["joyful"] == NOT_IN_DICTIONARY

    def test_info_not_found(self, client):
        response = client.get("/api/path/info", params={"word1": "xyzzy", "word2": "happy"})
        assert response.status_code == 404


class TestGenerateEndpoints:
    def test_random_path(self, client):
        response = client.get("/api/generate/random-path", params={"startWord": "happy", "depth": 2})
        assert response.status_code == 200
        assert response.json() == ["happy", "joyful", "elated"]

    @pytest.mark.parametrize("start, depth", [("happy", 0), ("xyzzy", 2), ("happy", 5)])
    def test_random_path_not_found(self, client, start, depth):
        response = client.get("/api/generate/random-path", params={"startWord": start, "depth": depth})
        assert response.status_code == 404


class FailingEngine(SynonymEngine):
    def find_path(self, start, end):
        raise RuntimeError("adjacency corrupted")


class TestErrorHandling:
    @pytest.fixture
    def failing_client(self, scenario_graph):
        with TestClient(create_app(EngineHandle(FailingEngine(scenario_graph)))) as client:
            yield client

    def test_unexpected_error_returns_500(self, failing_client, caplog):
        with caplog.at_level(logging.ERROR, logger="synonym_network.api.app"):
            response = failing_client.get("/api/path/shortest", params={"word1": "happy", "word2": "elated"})
        assert response.status_code == 500
        assert response.json()["detail"] == "adjacency corrupted"
        records = [r for r in caplog.records if r.name == "synonym_network.api.app"]
        assert records and records[-1].levelno == logging.ERROR
        assert records[-1].exc_info is not None

    def test_not_found_still_404(self, failing_client):
        response = failing_client.get("/api/path/level", params={"word1": "happy", "word2": "xyzzy"})
        assert response.status_code == 404
        assert response.json()["detail"] == "not found"


class TestStartup:
    def test_loads_engine_from_env(self, monkeypatch, source_file):
        monkeypatch.setenv("SYNNET_SOURCE_PATH", str(source_file))
        monkeypatch.delenv("SYNNET_DICTIONARY_PATH", raising=False)
        with TestClient(create_app()) as client:
            data = client.get("/health").json()
        assert data["vertices"] == 4
        assert data["definitions"] == 0

    def test_missing_source_aborts_startup(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SYNNET_SOURCE_PATH", str(tmp_path / "missing.txt"))
        with pytest.raises(SourceLoadError):
            with TestClient(create_app()):
                pass

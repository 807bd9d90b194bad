"""FastAPI HTTP server exposing read-only synonym graph queries."""

import logging
import os
import sys
from contextlib import asynccontextmanager

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Query, Request
from pydantic import BaseModel, ConfigDict, Field

from ..core import EngineConfig, EngineHandle, SynonymEngine, normalize_word
from ..version import __version__

# Configure logging
log_level = os.getenv("SYNNET_LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)

NOT_FOUND = "not found"


# ============================================================================
# Response Models
# ============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    vertices: int
    edges: int
    definitions: int


class PathStatisticsResponse(BaseModel):
    """Node and edge counts of a path."""
    nodes: int
    edges: int


class PathInfoResponse(BaseModel):
    """Shortest path with display enrichment."""
    model_config = ConfigDict(populate_by_name=True)

    path: list[str]
    connection_level: int = Field(..., alias="connectionLevel")
    path_synonyms: dict[str, list[str]] = Field(..., alias="pathSynonyms")
    word_definitions: dict[str, str] = Field(..., alias="wordDefinitions")


# ============================================================================
# Dependencies
# ============================================================================

def get_engine(request: Request) -> SynonymEngine:
    """Current engine from the handle installed on the app."""
    handle: EngineHandle | None = getattr(request.app.state, "engines", None)
    if handle is None:
        raise HTTPException(status_code=500, detail="Engine not initialized")
    return handle.current()


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail=NOT_FOUND)


def _sorted_synonyms(synonyms: dict[str, set[str]]) -> dict[str, list[str]]:
    return {word: sorted(words) for word, words in synonyms.items()}


router = APIRouter()


# ============================================================================
# API Endpoints
# ============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(engine: SynonymEngine = Depends(get_engine)):
    """Health check endpoint."""
    return {"status": "ok", "version": __version__, **engine.stats()}


@router.get("/api/graph/exists")
async def contains_word(word: str, engine: SynonymEngine = Depends(get_engine)) -> bool:
    try:
        return engine.contains(normalize_word(word))
    except Exception as e:
        logger.error(f"Error checking word: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/graph/definition")
async def get_definition(word: str, engine: SynonymEngine = Depends(get_engine)) -> str:
    try:
        definition = engine.lookup_definition(normalize_word(word))
    except Exception as e:
        logger.error(f"Error looking up definition: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if definition is None:
        raise _not_found()
    return definition


@router.get("/api/graph/neighbors")
async def get_neighbors(word: str, engine: SynonymEngine = Depends(get_engine)) -> list[str]:
    try:
        neighbors = engine.neighbors(normalize_word(word))
    except Exception as e:
        logger.error(f"Error reading neighbors: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if neighbors is None:
        raise _not_found()
    return neighbors


@router.post("/api/graph/definitions")
async def get_definitions_for_path(
    path: list[str] = Body(...),
    engine: SynonymEngine = Depends(get_engine),
) -> dict[str, str]:
    """Definition (or the not-in-dictionary sentinel) for each word of a path."""
    try:
        return engine.definitions_for_path([normalize_word(w) for w in path])
    except Exception as e:
        logger.error(f"Error reading definitions: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/api/graph/synonyms")
async def get_synonyms_for_path(
    path: list[str] = Body(...),
    cap: int | None = Query(None, ge=0),
    engine: SynonymEngine = Depends(get_engine),
) -> dict[str, list[str]]:
    """Bounded off-path neighbors for each word of a caller-supplied path."""
    try:
        synonyms = engine.path_synonyms([normalize_word(w) for w in path], cap)
    except Exception as e:
        logger.error(f"Error sampling synonyms: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    return _sorted_synonyms(synonyms or {})


@router.post("/api/graph/statistics", response_model=PathStatisticsResponse)
async def get_path_statistics(
    path: list[str] = Body(...),
    engine: SynonymEngine = Depends(get_engine),
):
    statistics = engine.path_statistics(path)
    if statistics is None:
        raise _not_found()
    return statistics


@router.get("/api/path/shortest")
async def find_shortest_path(
    word1: str, word2: str, engine: SynonymEngine = Depends(get_engine)
) -> list[str]:
    try:
        path = engine.find_path(normalize_word(word1), normalize_word(word2))
    except Exception as e:
        logger.error(f"Error finding path: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if path is None:
        raise _not_found()
    return path


@router.get("/api/path/level")
async def get_connection_level(
    word1: str, word2: str, engine: SynonymEngine = Depends(get_engine)
) -> int:
    try:
        level = engine.connection_level(normalize_word(word1), normalize_word(word2))
    except Exception as e:
        logger.error(f"Error computing connection level: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if level < 0:
        raise _not_found()
    return level


@router.get("/api/path/synonyms")
async def get_path_synonyms(
    word1: str, word2: str, engine: SynonymEngine = Depends(get_engine)
) -> dict[str, list[str]]:
    try:
        path = engine.find_path(normalize_word(word1), normalize_word(word2))
        synonyms = engine.path_synonyms(path)
    except Exception as e:
        logger.error(f"Error reading path synonyms: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if synonyms is None:
        raise _not_found()
    return _sorted_synonyms(synonyms)


@router.get("/api/path/connected")
async def are_words_connected(
    word1: str, word2: str, engine: SynonymEngine = Depends(get_engine)
) -> bool:
    try:
        return engine.are_connected(normalize_word(word1), normalize_word(word2))
    except Exception as e:
        logger.error(f"Error checking connection: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/api/path/info", response_model=PathInfoResponse)
async def get_path_info(word1: str, word2: str, engine: SynonymEngine = Depends(get_engine)):
    """Shortest path with its level, synonyms and definitions."""
    try:
        info = engine.path_info(normalize_word(word1), normalize_word(word2))
    except Exception as e:
        logger.error(f"Error building path info: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if info is None:
        raise _not_found()
    return PathInfoResponse(
        path=info["path"],
        connection_level=info["connection_level"],
        path_synonyms=_sorted_synonyms(info["path_synonyms"]),
        word_definitions=info["word_definitions"],
    )


@router.get("/api/generate/random-path")
async def generate_random_path(
    start_word: str = Query(..., alias="startWord"),
    depth: int = Query(...),
    engine: SynonymEngine = Depends(get_engine),
) -> list[str]:
    try:
        result = engine.walk(normalize_word(start_word), depth)
    except Exception as e:
        logger.error(f"Error generating random path: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    if not result.found:
        logger.debug(f"Random path from '{start_word}' at depth {depth}: {result.status.value}")
        raise _not_found()
    return result.path


# ============================================================================
# App factory
# ============================================================================

def create_app(handle: EngineHandle | None = None) -> FastAPI:
    """
    Build the HTTP app around an engine handle.

    With no handle, the engine is loaded from SYNNET_* environment variables
    during startup, and a load failure aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting Synonym Network HTTP Server...")

        if app.state.engines is None:
            app.state.engines = EngineHandle.from_config(EngineConfig.from_env())

        stats = app.state.engines.current().stats()
        logger.info(f"Server ready: {stats['vertices']} words, {stats['edges']} edges")

        yield

        logger.info("Server stopped")

    app = FastAPI(
        title="Synonym Network Server",
        description="Read-only synonym connectivity queries",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.engines = handle
    app.include_router(router)
    return app

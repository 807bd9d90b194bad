#!/usr/bin/env python3
"""
Command-line entry point for the Synonym Network.

Usage:
    synonym-network [--source FILE] path WORD1 WORD2
    synonym-network [--source FILE] walk WORD DEPTH
    synonym-network [--source FILE] serve [--port PORT] [--host HOST]

Environment variables:
    SYNNET_SOURCE_PATH: Adjacency source file (default: data/synonyms.txt)
    SYNNET_DICTIONARY_PATH: Dictionary CSV (default: none)
    SYNNET_HTTP_PORT: Server port (default: 8080)
    SYNNET_HTTP_HOST: Server host (default: 127.0.0.1)
    SYNNET_LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from .core import EngineConfig, EngineHandle, SourceLoadError, SynonymEngine, normalize_word


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore synonym connectivity between words")
    parser.add_argument("--source", default=None, help="Adjacency source file")
    parser.add_argument("--delimiter", default=None, help="Field delimiter (default: ',')")
    parser.add_argument("--dictionary", default=None, help="Dictionary CSV of word,definition rows")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for walks")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO)")

    sub = parser.add_subparsers(dest="command", required=True)

    path = sub.add_parser("path", help="Find the shortest connection between two words")
    path.add_argument("start")
    path.add_argument("end")

    walk = sub.add_parser("walk", help="Generate a random path of connected words")
    walk.add_argument("start")
    walk.add_argument("depth", type=int)

    define = sub.add_parser("define", help="Look up a word definition")
    define.add_argument("word")

    synonyms = sub.add_parser("synonyms", help="Show synonyms along the shortest path")
    synonyms.add_argument("start")
    synonyms.add_argument("end")
    synonyms.add_argument("--cap", type=int, default=None, help="Synonyms per word")

    neighbors = sub.add_parser("neighbors", help="List the words adjacent to a word")
    neighbors.add_argument("word")

    sub.add_parser("stats", help="Show graph size")

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--port", type=int, default=None, help="Server port (default: 8080)")
    serve.add_argument("--host", default=None, help="Server host (default: 127.0.0.1)")

    return parser


def config_from_args(args: argparse.Namespace) -> EngineConfig:
    """Environment config, overridden by any command-line flags."""
    config = EngineConfig.from_env()
    if args.source:
        config.source_path = Path(args.source)
    if args.delimiter:
        config.delimiter = args.delimiter
    if args.dictionary:
        config.dictionary_path = Path(args.dictionary)
    if args.seed is not None:
        config.random_seed = args.seed
    return config


def _print_path(path: list[str]):
    print(f"Path: {' -> '.join(path)}")
    print(f"Connection Level: {len(path) - 1}")


def run_command(engine: SynonymEngine, args: argparse.Namespace) -> int:
    """Run one query subcommand. Returns the process exit code."""
    if args.command == "path":
        path = engine.find_path(normalize_word(args.start), normalize_word(args.end))
        if path is None:
            print("No path found between these two words")
            return 1
        _print_path(path)

    elif args.command == "walk":
        result = engine.walk(normalize_word(args.start), args.depth)
        if not result.found:
            print(f"No random path found ({result.status.value})")
            return 1
        _print_path(result.path)

    elif args.command == "define":
        print(engine.definition_of(normalize_word(args.word)))

    elif args.command == "synonyms":
        path = engine.find_path(normalize_word(args.start), normalize_word(args.end))
        if path is None:
            print("No path found between these two words")
            return 1
        for word, words in engine.path_synonyms(path, args.cap).items():
            print(f"{word}: {', '.join(sorted(words))}")

    elif args.command == "neighbors":
        neighbors = engine.neighbors(normalize_word(args.word))
        if neighbors is None:
            print(f"input not contain '{args.word}'")
            return 1
        for neighbor in neighbors:
            print(f"   {neighbor}")

    elif args.command == "stats":
        stats = engine.stats()
        print(f"Vertices: {stats['vertices']}")
        print(f"Edges: {stats['edges']}")
        print(f"Definitions: {stats['definitions']}")

    return 0


def serve(handle: EngineHandle, args: argparse.Namespace) -> int:
    """Start the HTTP server."""
    if args.port:
        os.environ["SYNNET_HTTP_PORT"] = str(args.port)
    if args.host:
        os.environ["SYNNET_HTTP_HOST"] = args.host

    port = int(os.getenv("SYNNET_HTTP_PORT", "8080"))
    host = os.getenv("SYNNET_HTTP_HOST", "127.0.0.1")
    log_level = os.getenv("SYNNET_LOG_LEVEL", "INFO").lower()

    print(f"Starting Synonym Network HTTP Server on {host}:{port}")
    print(f"Log level: {log_level.upper()}")
    print("Press Ctrl+C to stop")
    print("")

    import uvicorn
    from .api import create_app

    try:
        uvicorn.run(create_app(handle), host=host, port=port, log_level=log_level)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        os.environ["SYNNET_LOG_LEVEL"] = args.log_level.upper()
    log_level = os.getenv("SYNNET_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    try:
        handle = EngineHandle.from_config(config_from_args(args))
    except SourceLoadError as e:
        print(f"Error loading sources: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.command == "serve":
        return serve(handle, args)
    return run_command(handle.current(), args)


if __name__ == "__main__":
    sys.exit(main())

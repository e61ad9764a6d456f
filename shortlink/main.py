"""Command-line entry point that wires the layers and serves the API."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Sequence

from flask import Flask

from .service import URLService
from .sqlite_repository import RepositoryError, SQLiteRepository
from .web import DEFAULT_BASE_URL, create_app

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "./data"
DEFAULT_PORT = 8080
DB_FILENAME = "shortener.db"


def build_app(data_dir: str | os.PathLike[str] = DEFAULT_DATA_DIR) -> Flask:
    """Create the data directory, open the database and return the application."""
    directory = Path(data_dir)
    directory.mkdir(parents=True, exist_ok=True)
    repo = SQLiteRepository(directory / DB_FILENAME)
    app = create_app(URLService(repo), DEFAULT_BASE_URL)
    app.extensions["shortlink_repository"] = repo
    return app


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="shortlink", description="URL shortener API")
    parser.add_argument("--data-dir", default=DEFAULT_DATA_DIR, help="database directory")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the API server; return a non-zero status on startup failure."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    logger.info("Starting URL Shortener API...")
    try:
        app = build_app(args.data_dir)
    except OSError as exc:
        logger.error("Failed to create data directory: %s", exc)
        return 1
    except RepositoryError as exc:
        logger.error("Failed to initialize repository: %s", exc)
        return 1
    logger.info("Server is listening on port :%d", args.port)
    try:
        app.run(host=args.host, port=args.port)
    except OSError as exc:
        logger.error("Failed to start server: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""SQLite-backed storage for short URLs."""

from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import replace
from datetime import datetime
from os import PathLike

from .domain import ShortURL, URLNotFoundError, URLRepository

logger = logging.getLogger(__name__)

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS urls (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    original_url TEXT NOT NULL,
    short_code TEXT NOT NULL UNIQUE,
    created_at DATETIME NOT NULL
)
"""
_INSERT = "INSERT INTO urls (original_url, short_code, created_at) VALUES (?, ?, ?)"
_SELECT = "SELECT id, original_url, short_code, created_at FROM urls WHERE short_code = ?"


class RepositoryError(Exception):
    """Raised when the database fails."""


class SQLiteRepository(URLRepository):
    """URL repository stored in an SQLite database file."""

    def __init__(self, db_path: str | PathLike[str]) -> None:
        logger.info("Initializing SQLite repository...")
        try:
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise RepositoryError(f"failed to open sqlite database: {exc}") from exc
        try:
            with self._conn:
                self._conn.execute(_CREATE_TABLE)
        except sqlite3.Error as exc:
            self._conn.close()
            raise RepositoryError(f"failed to create 'urls' table: {exc}") from exc
        self._lock = threading.Lock()
        logger.info("SQLite repository initialized successfully.")

    def save(self, url: ShortURL) -> ShortURL:
        """Insert ``url`` and return it with id and creation time set."""
        logger.info("Attempting to save URL: %s with code: %s", url.original_url, url.short_code)
        created_at = datetime.now().astimezone()
        try:
            with self._lock, self._conn:
                cursor = self._conn.execute(
                    _INSERT, (url.original_url, url.short_code, created_at.isoformat())
                )
        except sqlite3.Error as exc:
            logger.error("Failed to save URL: %s", exc)
            raise RepositoryError(f"database error on save: {exc}") from exc
        if cursor.lastrowid is None:
            raise RepositoryError("failed to retrieve last insert ID")
        saved = replace(url, id=cursor.lastrowid, created_at=created_at)
        logger.info("URL saved successfully with ID: %d", saved.id)
        return saved

    def find_by_code(self, code: str) -> ShortURL:
        """Return the URL stored under ``code``."""
        logger.info("Attempting to find URL by code: %s", code)
        try:
            with self._lock:
                row = self._conn.execute(_SELECT, (code,)).fetchone()
        except sqlite3.Error as exc:
            logger.error("Failed to find URL by code: %s", exc)
            raise RepositoryError(f"database error on find: {exc}") from exc
        if row is None:
            logger.info("URL not found for code: %s", code)
            raise URLNotFoundError()
        row_id, original_url, short_code, created_at = row
        try:
            created = datetime.fromisoformat(created_at)
        except (TypeError, ValueError) as exc:
            raise RepositoryError(f"database error on find: {exc}") from exc
        logger.info("URL found for code %s: (ID: %d)", code, row_id)
        return ShortURL(
            original_url=original_url, short_code=short_code, id=row_id, created_at=created
        )

    def close(self) -> None:
        """Close the database connection."""
        self._conn.close()

    def __enter__(self) -> SQLiteRepository:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
"""A URL shortener service with SQLite storage and a small Flask HTTP API."""

__version__ = "0.1.0"
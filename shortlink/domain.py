"""Core data types and the storage contract for short URLs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ShortURL:
    """A mapping between an original URL and its short code."""

    original_url: str
    short_code: str
    id: int = 0
    created_at: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dictionary of this record."""
        return {
            "id": self.id,
            "original_url": self.original_url,
            "short_code": self.short_code,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class URLNotFoundError(LookupError):
    """Raised when no URL is stored under a short code."""

    def __init__(self, message: str = "short URL not found") -> None:
        super().__init__(message)


class URLRepository(ABC):
    """Persistence contract for short URLs."""

    @abstractmethod
    def save(self, url: ShortURL) -> ShortURL:
        """Store ``url`` and return it with its id and creation time filled in."""

    @abstractmethod
    def find_by_code(self, code: str) -> ShortURL:
        """Return the URL stored under ``code`` or raise URLNotFoundError."""
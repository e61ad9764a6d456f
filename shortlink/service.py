"""Business logic for creating and resolving short URLs."""

from __future__ import annotations

import logging
from typing import Callable

from .codegen import generate_short_code
from .domain import ShortURL, URLRepository

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Raised when a short URL cannot be created."""


class URLService:
    """Creates short URLs and looks them up through a repository."""

    def __init__(
        self,
        repo: URLRepository,
        code_generator: Callable[[], str] = generate_short_code,
    ) -> None:
        self._repo = repo
        self._generate_code = code_generator

    def create_short_url(self, original_url: str) -> ShortURL:
        """Generate a code for ``original_url``, store it and return the record."""
        logger.info("Service: Attempting to create short URL for: %s", original_url)
        url = ShortURL(original_url=original_url, short_code=self._generate_code())
        try:
            saved = self._repo.save(url)
        except Exception as exc:
            logger.error("Service failed to save URL: %s", exc)
            raise ServiceError(f"could not save URL: {exc}") from exc
        logger.info("Service: Successfully created short URL with code %s", saved.short_code)
        return saved

    def get_original_url(self, code: str) -> ShortURL:
        """Return the record stored under ``code``.

        Repository errors, including URLNotFoundError, propagate unchanged.
        """
        logger.info("Service: Attempting to find original URL for code: %s", code)
        try:
            url = self._repo.find_by_code(code)
        except Exception as exc:
            logger.error("Service failed to find URL by code %s: %s", code, exc)
            raise
        logger.info("Service: Found original URL for code %s", code)
        return url
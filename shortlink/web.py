"""HTTP endpoints for shortening URLs and following short links."""

from __future__ import annotations

import json
import logging
from typing import Any

from flask import Flask, Response, redirect, request

from .domain import URLNotFoundError
from .service import URLService

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8080"


class _InvalidBody(ValueError):
    """The request body is not a valid shorten request."""


def _text_error(message: str, status: int) -> Response:
    response = Response(message + "\n", status=status, mimetype="text/plain")
    response.headers["X-Content-Type-Options"] = "nosniff"
    return response


def _lookup_url_field(payload: dict[str, Any]) -> Any:
    if "url" in payload:
        return payload["url"]
    for key, value in payload.items():
        if key.lower() == "url":
            return value
    return None


def _parse_shorten_body(body: bytes) -> str:
    try:
        text = body.decode("utf-8")
        payload, _ = json.JSONDecoder().raw_decode(text.lstrip(" \t\r\n"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise _InvalidBody(str(exc)) from exc
    if payload is None:
        return ""
    if not isinstance(payload, dict):
        raise _InvalidBody("request body must be a JSON object")
    value = _lookup_url_field(payload)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _InvalidBody("url must be a string")
    return value


class URLHandler:
    """Request handlers backed by a URLService."""

    def __init__(self, service: URLService, base_url: str = DEFAULT_BASE_URL) -> None:
        self._service = service
        self._base_url = base_url

    def register_routes(self, app: Flask) -> None:
        """Attach the shorten and redirect routes to ``app``."""
        app.add_url_rule(
            "/shorten", endpoint="shorten_url", view_func=self.shorten_url, methods=["POST"]
        )
        app.add_url_rule(
            "/<short_code>",
            endpoint="redirect_url",
            view_func=self.redirect_url,
            methods=["GET"],
        )

    def shorten_url(self) -> Response:
        """Create a short URL from the JSON body ``{"url": ...}``."""
        logger.info("Handler: Received request to shorten URL")
        try:
            original_url = _parse_shorten_body(request.get_data())
        except _InvalidBody as exc:
            logger.error("Failed to decode request body: %s", exc)
            return _text_error("Invalid request body", 400)

        if not original_url:
            logger.error("URL is empty in request")
            return _text_error("URL cannot be empty", 400)

        try:
            short = self._service.create_short_url(original_url)
        except Exception as exc:
            logger.error("Service failed to create short URL: %s", exc)
            return _text_error("Internal server error", 500)

        body = json.dumps({"short_url": f"{self._base_url}/{short.short_code}"}) + "\n"
        logger.info("Handler: Successfully created and returned short URL")
        return Response(body, status=201, mimetype="application/json")

    def redirect_url(self, short_code: str) -> Response:
        """Redirect to the original URL stored under ``short_code``."""
        logger.info("Handler: Received request to redirect for code: %s", short_code)
        try:
            url = self._service.get_original_url(short_code)
        except URLNotFoundError:
            logger.info("Handler: URL not found for code: %s", short_code)
            return _text_error("URL not found", 404)
        except Exception as exc:
            logger.error("Service failed to find URL: %s", exc)
            return _text_error("Internal server error", 500)
        logger.info("Handler: Redirecting code %s to %s", short_code, url.original_url)
        return redirect(url.original_url, code=302)


def create_app(service: URLService, base_url: str = DEFAULT_BASE_URL) -> Flask:
    """Build a Flask application serving the URL shortener."""
    app = Flask(__name__)
    URLHandler(service, base_url).register_routes(app)
    return app
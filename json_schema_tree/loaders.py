"""
Document loading for the schema pool.

Resolves a canonical URI to decoded JSON content, from pre-registered
in-memory documents, HTTP(S) URLs or file:// URLs.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

import requests

from .config import ParserConfig
from .errors import DecodeError, FetchError
from .reference import JsonReference

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Fetches and decodes schema documents by URI."""

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self._registered: dict[str, Any] = {}

    def register(self, uri: str, document: Any) -> None:
        """Make an already decoded document available under uri."""
        self._registered[JsonReference(uri).canonical] = document

    def load(self, uri: str) -> Any:
        """
        Fetch and decode the document at uri.

        Args:
            uri: Canonical (fragment-free) URI of the document

        Returns:
            The decoded JSON value

        Raises:
            FetchError: If the document cannot be retrieved
            DecodeError: If the content is not valid JSON
        """
        canonical = JsonReference(uri).canonical
        if canonical in self._registered:
            logger.debug("Using registered document %s", canonical)
            return self._registered[canonical]

        text = self.fetch_content(uri)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DecodeError(uri, str(e)) from e

    def fetch_content(self, uri: str) -> str:
        """Return the raw text at uri, dispatching on its scheme."""
        parsed_url = urlparse(uri)
        scheme = parsed_url.scheme

        if scheme in ("http", "https"):
            logger.debug("Fetching %s over HTTP", uri)
            try:
                response = requests.get(uri, timeout=self.config.http_timeout)
                # 4XX/5XX become errors
                response.raise_for_status()
            except requests.RequestException as e:
                raise FetchError(uri, str(e)) from e
            return response.text

        if scheme == "file":
            file_path = url2pathname(parsed_url.path)
            logger.debug("Reading %s", file_path)
            try:
                with open(file_path, encoding=self.config.encoding) as f:
                    return f.read()
            except OSError as e:
                raise FetchError(uri, str(e)) from e
            except UnicodeDecodeError as e:
                raise DecodeError(uri, str(e)) from e

        raise FetchError(uri, f"Unsupported URL scheme: {scheme!r}")

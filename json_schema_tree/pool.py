"""
Document pool: caches fetched schema documents by canonical URI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .loaders import DocumentLoader
from .reference import JsonReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolDocument:
    """A decoded document and the canonical reference it was fetched under."""

    reference: JsonReference
    document: Any


class SchemaPool:
    """Caches decoded documents for the duration of one top-level parse.

    At most one PoolDocument exists per canonical URI; the loader is
    called only on the first request for a given URI.
    """

    def __init__(self, loader: DocumentLoader | None = None):
        self.loader = loader or DocumentLoader()
        self._documents: dict[str, PoolDocument] = {}

    def get_document(self, reference: JsonReference) -> PoolDocument:
        """Return the cached document for reference, fetching it on first use."""
        canonical = reference.canonical
        pool_document = self._documents.get(canonical)
        if pool_document is not None:
            logger.debug("Pool hit for %s", canonical)
            return pool_document

        document = self.loader.load(canonical)
        pool_document = PoolDocument(reference=JsonReference(canonical), document=document)
        self._documents[canonical] = pool_document
        return pool_document

    def __contains__(self, reference: JsonReference) -> bool:
        return reference.canonical in self._documents

    def __len__(self) -> int:
        return len(self._documents)

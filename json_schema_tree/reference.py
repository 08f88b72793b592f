"""
JSON Reference value type.

A reference is a URI, possibly relative, whose fragment is a JSON Pointer
into the document the URI identifies.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
from urllib.parse import unquote, urldefrag, urljoin, urlparse

import jsonpointer
from jsonpointer import JsonPointerException

from .errors import InvalidReferenceError, PointerNotFoundError, ReferenceInheritanceError


class JsonReference:
    """An immutable URI reference with a JSON Pointer fragment."""

    __slots__ = ("url", "canonical", "fragment", "has_full_url", "_pointer")

    def __init__(self, reference: str):
        if not isinstance(reference, str):
            raise InvalidReferenceError(repr(reference), "reference must be a string")
        try:
            parsed = urlparse(reference)
        except ValueError as e:
            raise InvalidReferenceError(reference, str(e)) from e

        self.url = parsed.geturl()
        self.canonical, fragment = urldefrag(self.url)
        self.fragment = unquote(fragment)
        self.has_full_url = bool(parsed.scheme) and (bool(parsed.netloc) or parsed.scheme == "file")

        try:
            self._pointer = jsonpointer.JsonPointer(self.fragment)
        except JsonPointerException as e:
            raise InvalidReferenceError(reference, f"fragment is not a JSON pointer: {e}") from e

    @classmethod
    def from_path(cls, path: str | Path) -> JsonReference:
        """Build a file:// reference from a filesystem path, keeping any #fragment."""
        path_part, sep, fragment = str(path).partition("#")
        uri = Path(path_part).resolve().as_uri()
        return cls(f"{uri}{sep}{fragment}")

    @property
    def pointer(self) -> jsonpointer.JsonPointer:
        return self._pointer

    def inherit(self, child: JsonReference) -> JsonReference:
        """Resolve child against this reference, as a base URI."""
        if not self.has_full_url:
            raise ReferenceInheritanceError(self.url, child.url)

        inherited = JsonReference(urljoin(self.url, child.url))
        if not inherited.has_full_url:
            raise ReferenceInheritanceError(self.url, child.url)
        return inherited

    def resolve_pointer(self, document: Any) -> Any:
        """Return the value the fragment points at inside a decoded document."""
        try:
            return self._pointer.resolve(document)
        except JsonPointerException as e:
            raise PointerNotFoundError(self.url, self.fragment) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonReference):
            return NotImplemented
        return self.url == other.url

    def __hash__(self) -> int:
        return hash(self.url)

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"JsonReference({self.url!r})"

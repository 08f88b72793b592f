"""
Schema document parser.

Builds a SchemaNode tree from a JSON Schema document, resolving $ref by
substitution: a referencing node takes the keywords of the schema it
points at, possibly in another document fetched through the pool.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .config import ParserConfig
from .errors import (
    InvalidTypeError,
    MissingRequiredKeywordError,
    NotAnObjectError,
    ReferenceCycleError,
    ReferenceInheritanceError,
    RefNotAllowedAtRootError,
    WrongTypeError,
)
from .loaders import DocumentLoader
from .nodes import ROOT_SCHEMA_PROPERTY, SCHEMA_TYPES, SchemaNode
from .pool import SchemaPool
from .reference import JsonReference

logger = logging.getLogger(__name__)


class Keyword(str, Enum):
    """Schema keywords understood by the parser, in the order they are checked."""

    SCHEMA = "$schema"
    REF = "$ref"
    ID = "$id"
    LEGACY_ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    TYPE = "type"
    PROPERTIES = "properties"
    ITEMS = "items"


# Optional string keywords and the SchemaNode attribute each one sets.
# $id wins over the draft-04 spelling when both are present.
_STRING_KEYWORDS: tuple[tuple[tuple[Keyword, ...], str], ...] = (
    ((Keyword.ID, Keyword.LEGACY_ID), "id"),
    ((Keyword.TITLE,), "title"),
    ((Keyword.DESCRIPTION,), "description"),
)


class SchemaDocument:
    """A parsed schema document.

    Parsing happens on construction and fails fast: the first structural
    error raises and no tree is returned.
    """

    def __init__(
        self,
        document_reference: str,
        loader: DocumentLoader | None = None,
        config: ParserConfig | None = None,
    ):
        """
        Load and parse a schema document.

        Args:
            document_reference: URL of the document, or a filesystem path
            loader: Loader used to fetch documents (defaults to a DocumentLoader)
            config: Parser options

        Raises:
            SchemaError: On the first fetch, reference or keyword error
        """
        self.config = config or ParserConfig()

        reference = JsonReference(document_reference)
        if not reference.has_full_url:
            reference = JsonReference.from_path(document_reference)
        self.reference = reference

        self.pool = SchemaPool(loader or DocumentLoader(self.config))
        pool_document = self.pool.get_document(self.reference)

        self.root_schema = SchemaNode(property=ROOT_SCHEMA_PROPERTY)
        logger.debug("Parsing schema document %s", self.reference)
        self._parse_schema(pool_document.document, self.root_schema, ())

    def _parse_schema(self, document_node: Any, current_schema: SchemaNode, active_refs: tuple[str, ...]) -> None:
        """
        Populate current_schema from a decoded schema object.

        Args:
            document_node: Decoded JSON value for this schema
            current_schema: The node being populated
            active_refs: References being expanded on the current recursion path
        """
        path = current_schema.path
        if not isinstance(document_node, dict):
            raise NotAnObjectError("schema", path)

        m = document_node

        if current_schema is self.root_schema:
            self._parse_root_keywords(m, current_schema)

        m, active_refs = self._resolve_ref(m, current_schema, active_refs)

        for keywords, attribute in _STRING_KEYWORDS:
            for keyword in keywords:
                if keyword.value not in m:
                    continue
                value = m[keyword.value]
                if not isinstance(value, str):
                    raise WrongTypeError(keyword.value, "string", path)
                setattr(current_schema, attribute, value)
                break

        schema_type = m.get(Keyword.TYPE.value)
        if not isinstance(schema_type, str):
            raise MissingRequiredKeywordError(Keyword.TYPE.value, path)
        if schema_type not in SCHEMA_TYPES:
            raise InvalidTypeError(schema_type, path)
        current_schema.schema_type = schema_type

        if Keyword.PROPERTIES.value in m:
            self._parse_properties(m[Keyword.PROPERTIES.value], current_schema, active_refs)

        if Keyword.ITEMS.value in m:
            items_schema = SchemaNode(ref=current_schema.ref)
            current_schema.set_items_child(items_schema)
            self._parse_schema(m[Keyword.ITEMS.value], items_schema, active_refs)

    def _parse_root_keywords(self, m: dict[str, Any], root_schema: SchemaNode) -> None:
        if Keyword.SCHEMA.value not in m:
            raise MissingRequiredKeywordError(Keyword.SCHEMA.value)
        schema_ref = m[Keyword.SCHEMA.value]
        if not isinstance(schema_ref, str):
            raise WrongTypeError(Keyword.SCHEMA.value, "string")
        root_schema.schema_dialect = JsonReference(schema_ref)

        root_schema.ref = self.reference

        if Keyword.REF.value in m:
            raise RefNotAllowedAtRootError()

    def _resolve_ref(
        self,
        m: dict[str, Any],
        current_schema: SchemaNode,
        active_refs: tuple[str, ...],
    ) -> tuple[dict[str, Any], tuple[str, ...]]:
        """
        Follow $ref until a schema object without one is reached.

        Updates current_schema.ref to the resolved reference and returns the
        target schema object along with the extended set of active references.
        """
        path = current_schema.path
        while Keyword.REF.value in m:
            ref_string = m[Keyword.REF.value]
            if not isinstance(ref_string, str):
                raise WrongTypeError(Keyword.REF.value, "string", path)
            json_reference = JsonReference(ref_string)

            if json_reference.has_full_url:
                current_schema.ref = json_reference
            else:
                if current_schema.ref is None:
                    raise ReferenceInheritanceError(None, json_reference.url)
                current_schema.ref = current_schema.ref.inherit(json_reference)

            target = current_schema.ref
            if self.config.detect_reference_cycles and target.url in active_refs:
                raise ReferenceCycleError(target.url, list(active_refs), path)
            active_refs = (*active_refs, target.url)

            logger.debug("Resolving $ref %s for %s", target, path)
            pool_document = self.pool.get_document(target)
            resolved = target.resolve_pointer(pool_document.document)
            if not isinstance(resolved, dict):
                raise NotAnObjectError("schema", path)
            m = resolved

        return m, active_refs

    def _parse_properties(self, document_node: Any, current_schema: SchemaNode, active_refs: tuple[str, ...]) -> None:
        if not isinstance(document_node, dict):
            raise NotAnObjectError(Keyword.PROPERTIES.value, current_schema.path)

        for name, property_schema in document_node.items():
            child = SchemaNode(property=name, ref=current_schema.ref)
            current_schema.add_property_child(child)
            self._parse_schema(property_schema, child, active_refs)

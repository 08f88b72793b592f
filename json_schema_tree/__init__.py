"""JSON Schema Tree

Parses draft-04 style JSON Schema documents into an in-memory schema
tree, resolving $ref across documents fetched from files, HTTP URLs or
pre-registered in-memory sources.
"""

__version__ = "1.0.1"
__author__ = "François Lagunas"

from .config import ParserConfig
from .document import Keyword, SchemaDocument
from .errors import (
    DecodeError,
    FetchError,
    InvalidReferenceError,
    InvalidTypeError,
    MissingRequiredKeywordError,
    NotAnObjectError,
    PointerNotFoundError,
    ReferenceCycleError,
    ReferenceInheritanceError,
    RefNotAllowedAtRootError,
    SchemaError,
    WrongTypeError,
)
from .loaders import DocumentLoader
from .nodes import ROOT_SCHEMA_PROPERTY, SCHEMA_TYPES, SchemaNode
from .pool import PoolDocument, SchemaPool
from .reference import JsonReference
from .render import render_tree

__all__ = [
    "SchemaDocument",
    "SchemaNode",
    "SchemaPool",
    "PoolDocument",
    "DocumentLoader",
    "JsonReference",
    "ParserConfig",
    "Keyword",
    "render_tree",
    "ROOT_SCHEMA_PROPERTY",
    "SCHEMA_TYPES",
    "SchemaError",
    "NotAnObjectError",
    "MissingRequiredKeywordError",
    "WrongTypeError",
    "InvalidTypeError",
    "RefNotAllowedAtRootError",
    "InvalidReferenceError",
    "ReferenceInheritanceError",
    "PointerNotFoundError",
    "ReferenceCycleError",
    "FetchError",
    "DecodeError",
]

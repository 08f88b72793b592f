"""
Exceptions raised while loading and parsing schema documents.

Every error derives from SchemaError and carries the context needed to
build a readable message (keyword, expected kind, schema property).
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for all schema parsing failures."""

    def __init__(self, message: str, property: str | None = None):
        if property is not None:
            message = f"schema {property} - {message}"
        super().__init__(message)
        self.property = property


class NotAnObjectError(SchemaError):
    """A value that must be a JSON object was something else."""

    def __init__(self, context: str, property: str | None = None):
        super().__init__(f"{context} must be an object", property)
        self.context = context


class MissingRequiredKeywordError(SchemaError):
    """A required keyword ($schema at the root, type everywhere) is absent."""

    def __init__(self, keyword: str, property: str | None = None):
        super().__init__(f"{keyword} is required", property)
        self.keyword = keyword


class WrongTypeError(SchemaError):
    """A keyword is present but its value has the wrong JSON kind."""

    def __init__(self, keyword: str, expected: str, property: str | None = None):
        super().__init__(f"{keyword} must be of type {expected}", property)
        self.keyword = keyword
        self.expected = expected


class InvalidTypeError(SchemaError):
    """The type keyword names something outside the primitive type set."""

    def __init__(self, value: str, property: str | None = None):
        super().__init__(f"type {value!r} is invalid", property)
        self.value = value


class RefNotAllowedAtRootError(SchemaError):
    """The root schema carries a $ref."""

    def __init__(self):
        super().__init__("No $ref is allowed in root schema")


class InvalidReferenceError(SchemaError):
    """A reference string cannot be parsed."""

    def __init__(self, reference: str, reason: str):
        super().__init__(f"invalid reference {reference!r}: {reason}")
        self.reference = reference
        self.reason = reason


class ReferenceInheritanceError(SchemaError):
    """A relative reference cannot be resolved against its base."""

    def __init__(self, base: str | None, reference: str):
        super().__init__(f"cannot resolve {reference!r} against base {base!r}")
        self.base = base
        self.reference = reference


class PointerNotFoundError(SchemaError):
    """A fragment pointer does not exist inside the target document."""

    def __init__(self, reference: str, pointer: str):
        super().__init__(f"pointer {pointer!r} not found in {reference!r}")
        self.reference = reference
        self.pointer = pointer


class ReferenceCycleError(SchemaError):
    """A $ref is reached again while it is still being expanded."""

    def __init__(self, reference: str, chain: list[str], property: str | None = None):
        super().__init__(f"$ref cycle detected: {' -> '.join([*chain, reference])}", property)
        self.reference = reference
        self.chain = chain


class FetchError(SchemaError):
    """A document could not be retrieved (network, file or scheme failure)."""

    def __init__(self, uri: str, reason: str):
        super().__init__(f"failed to fetch {uri}: {reason}")
        self.uri = uri
        self.reason = reason


class DecodeError(SchemaError):
    """A fetched document is not valid JSON."""

    def __init__(self, uri: str, reason: str):
        super().__init__(f"failed to decode {uri}: {reason}")
        self.uri = uri
        self.reason = reason

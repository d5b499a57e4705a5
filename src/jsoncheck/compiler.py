"""Compiler: turns schema DSL values into explicit SchemaNode trees.

DSL conventions::

    "string"                    type name (see TypeTag)
    "undefined|string"          union of type names / literals
    '"paypal"'                  literal string
    5, True, None               literal scalars
    {"name": "string"}          object schema
    [candidate, ...]            candidate list / alternation
    [EACH, sub, ...]            each-clause (as a candidate entry)
    [[sub0, sub1]]              tuple clause (as a candidate entry)

The each marker may also be written as the string ``"/each/"`` or as
``re.compile("each")``.
"""

from __future__ import annotations

import logging
import re

from .classify import classify
from .config import DEFAULT_CONFIG, ValidatorConfig
from .errors import SchemaError
from .model import (
    EACH,
    NODE_TYPES,
    TYPE_ALIASES,
    Clause,
    EachClause,
    EachMarker,
    Literal,
    Never,
    ObjectSchema,
    SchemaNode,
    SequenceSchema,
    TupleClause,
    TypeName,
    TypeTag,
    TypeUnion,
    WholeInputClause,
)

logger = logging.getLogger(__name__)

EACH_TEXT = "/each/"
UNION_SEPARATOR = "|"
QUOTE = '"'

_KNOWN_TYPE_NAMES = frozenset(tag.value for tag in TypeTag)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def compile_schema(schema: object, *, config: ValidatorConfig | None = None) -> SchemaNode:
    """Compile a DSL *schema* value into a SchemaNode.

    Already compiled nodes, including ones nested inside DSL containers,
    are used as they are.  Malformed pieces raise ``SchemaError`` in strict
    mode and otherwise compile to ``Never``.
    """
    cfg = config or DEFAULT_CONFIG
    node = _Compiler(cfg).compile(schema)
    logger.debug("compiled schema to %s", type(node).__name__)
    return node


def is_each_marker(raw: object) -> bool:
    """Return True if *raw* spells the each marker."""
    if raw is EACH:
        return True
    if isinstance(raw, str):
        return raw == EACH_TEXT
    if isinstance(raw, re.Pattern):
        return raw.pattern == "each"
    return False


# ---------------------------------------------------------------------------
# Compiler
# ---------------------------------------------------------------------------

class _Compiler:
    """Single-use compiler; tracks the containers on the current path."""

    def __init__(self, config: ValidatorConfig) -> None:
        self.config = config
        self._active: set[int] = set()

    def compile(
        self, raw: object, depth: int = 0, *, leading: bool = False, candidate: bool = False
    ) -> SchemaNode:
        if isinstance(raw, NODE_TYPES):
            return raw
        if is_each_marker(raw):
            if not leading and self.config.strict:
                raise SchemaError("each marker must be the first entry of a candidate")
            return EachMarker()
        if isinstance(raw, str):
            return self._compile_string(raw)

        kind = classify(raw)
        if kind == TypeTag.KEYED or kind == TypeTag.SEQUENCE:
            return self._compile_container(raw, kind, depth, candidate)
        # numbers, booleans, None, enum members ... compare by value
        return Literal(raw)

    # -- Containers -----------------------------------------------------

    def _compile_container(self, raw, kind: str, depth: int, candidate: bool) -> SchemaNode:
        if depth >= self.config.max_depth:
            return self._reject(
                f"schema nested deeper than max_depth={self.config.max_depth}"
            )
        key = id(raw)
        if key in self._active:
            return self._reject("schema contains itself")
        self._active.add(key)
        try:
            if kind == TypeTag.KEYED:
                return self._compile_object(raw, depth + 1)
            return self._compile_sequence(raw, depth + 1, candidate)
        finally:
            self._active.discard(key)

    def _compile_object(self, raw, depth: int) -> ObjectSchema:
        return ObjectSchema({key: self.compile(sub, depth) for key, sub in raw.items()})

    def _compile_sequence(self, raw, depth: int, candidate: bool) -> SequenceSchema:
        # entries of a candidate list are candidates; the elements of a
        # candidate are schemas again, and only its head may be the marker
        entries = tuple(
            self.compile(item, depth, leading=candidate and index == 0, candidate=not candidate)
            for index, item in enumerate(raw)
        )
        return SequenceSchema(entries=entries, clauses=tuple(_as_clause(e) for e in entries))

    # -- Strings --------------------------------------------------------

    def _compile_string(self, text: str) -> SchemaNode:
        if UNION_SEPARATOR in text:
            members = tuple(self._compile_term(part) for part in text.split(UNION_SEPARATOR))
            return TypeUnion(members)
        return self._compile_term(text)

    def _compile_term(self, text: str) -> TypeName | Literal | Never:
        if QUOTE in text:
            return self._compile_literal(text)
        return self._compile_type_name(text)

    def _compile_literal(self, text: str) -> Literal | Never:
        if self.config.literal_quotes == "all":
            return Literal(text.replace(QUOTE, ""))
        if len(text) >= 2 and text.startswith(QUOTE) and text.endswith(QUOTE):
            return Literal(text[1:-1])
        return self._reject(f"literal {text!r} is not wrapped in one pair of double quotes")

    def _compile_type_name(self, text: str) -> TypeName | Never:
        alias = TYPE_ALIASES.get(text)
        if alias is not None:
            return TypeName(alias.value)
        if self.config.strict and text not in _KNOWN_TYPE_NAMES:
            return self._reject(f"unknown type name {text!r}")
        return TypeName(text)

    # -- Errors ---------------------------------------------------------

    def _reject(self, message: str) -> Never:
        if self.config.strict:
            raise SchemaError(message)
        logger.warning("%s; it will never match", message)
        return Never(message)


def _as_clause(entry: SchemaNode) -> Clause:
    """Read a compiled candidate-list entry as a clause."""
    if isinstance(entry, SequenceSchema):
        if entry.is_each:
            return EachClause(entry.entries[1:])
        return TupleClause(entry.entries)
    return WholeInputClause(entry)

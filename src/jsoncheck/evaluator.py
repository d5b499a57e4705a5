"""Evaluator: matches runtime values against compiled schema nodes."""

from __future__ import annotations

from collections.abc import Sequence

from .classify import classify, is_keyed, is_sequence
from .compiler import compile_schema
from .config import DEFAULT_CONFIG, ValidatorConfig
from .model import (
    NODE_TYPES,
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
    TypeUnion,
    Undefined,
    WholeInputClause,
)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def validate(value: object, schema: object, *, config: ValidatorConfig | None = None) -> bool:
    """Return True if *value* conforms to *schema*.

    *schema* is either a DSL value (compiled on the fly) or a node returned
    by ``compile_schema``.  A value that does not conform always yields
    False; ``SchemaError`` is only raised for malformed schemas in strict
    mode.
    """
    node = schema if isinstance(schema, NODE_TYPES) else compile_schema(schema, config=config)
    return match(value, node)


class Validator:
    """A schema compiled once and reusable across values and threads.

    Usage::

        check = Validator({"name": "string", "age": "number"})
        check({"name": "John Doe", "age": 32})   # → True
        check.check({"name": "John Doe"})        # → False
    """

    def __init__(self, schema: object, config: ValidatorConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.node = compile_schema(schema, config=self.config)

    def check(self, value: object) -> bool:
        return match(value, self.node)

    __call__ = check

    def __repr__(self) -> str:
        return f"Validator({self.node!r})"


# ---------------------------------------------------------------------------
# Node dispatch
# ---------------------------------------------------------------------------

def match(value: object, node: SchemaNode) -> bool:
    """Match *value* against a compiled *node*."""
    if isinstance(node, TypeName):
        return classify(value) == node.name
    if isinstance(node, Literal):
        return _strict_equal(value, node.value)
    if isinstance(node, TypeUnion):
        return any(match(value, member) for member in node.members)
    if isinstance(node, ObjectSchema):
        return _match_object(value, node)
    if isinstance(node, SequenceSchema):
        if is_sequence(value):
            return any(_match_clause(value, clause) for clause in node.clauses)
        return any(match(value, entry) for entry in node.entries)
    if isinstance(node, (EachMarker, Never)):
        return False
    raise TypeError(f"not a schema node: {node!r}")


def _strict_equal(value: object, expected: object) -> bool:
    # same tag first, so True never equals 1
    return classify(value) == classify(expected) and bool(value == expected)


def _match_object(value: object, node: ObjectSchema) -> bool:
    if not is_keyed(value):
        return False
    for key, sub in node.fields.items():
        item = value[key] if key in value else Undefined
        if not match(item, sub):
            return False
    return True


# ---------------------------------------------------------------------------
# Candidate-list clauses (sequence input)
# ---------------------------------------------------------------------------

def _match_clause(items: Sequence, clause: Clause) -> bool:
    if isinstance(clause, EachClause):
        return all(
            any(match(item, sub) for sub in clause.subs)
            for item in items
        )
    if isinstance(clause, TupleClause):
        for index, sub in enumerate(clause.items):
            item = items[index] if index < len(items) else Undefined
            if not match(item, sub):
                return False
        return True
    if isinstance(clause, WholeInputClause):
        return match(items, clause.node)
    raise TypeError(f"not a candidate clause: {clause!r}")

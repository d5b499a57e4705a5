"""Helpers for writing schema DSL values."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .compiler import QUOTE, UNION_SEPARATOR, is_each_marker
from .model import EACH, TypeTag


def union(*members: str) -> str:
    """Join type names / quoted literals into a union string.

    ``union("undefined", "string")`` → ``"undefined|string"``
    """
    if not members:
        raise ValueError("union() needs at least one member")
    for member in members:
        if not isinstance(member, str):
            raise TypeError(f"union members must be strings, got {type(member).__name__}")
    return UNION_SEPARATOR.join(members)


def literal(value: object) -> object:
    """Return the schema that matches exactly *value*.

    Strings are quote-delimited (``'"paypal"'``); numbers, booleans and
    ``None`` already act as literals and are returned unchanged.
    """
    if isinstance(value, str):
        if QUOTE in value or UNION_SEPARATOR in value:
            raise ValueError(f"literal {value!r} cannot contain '{QUOTE}' or '{UNION_SEPARATOR}'")
        return f"{QUOTE}{value}{QUOTE}"
    if isinstance(value, (Mapping, Sequence)):
        raise TypeError("literal() takes a scalar value")
    return value


def each(*subs: object) -> list:
    """Each-clause: every element must match at least one of *subs*."""
    return [EACH, *subs]


def one_of(*candidates: object) -> list:
    """Candidate list: the value passes if any candidate passes."""
    return list(candidates)


def optional(schema: object) -> object:
    """Allow *schema* or an absent value (``Undefined``)."""
    if isinstance(schema, str):
        return union(TypeTag.UNDEFINED.value, schema)
    if isinstance(schema, Sequence) and not (schema and is_each_marker(schema[0])):
        # keep the candidates at the same level
        return [TypeTag.UNDEFINED.value, *schema]
    return [TypeTag.UNDEFINED.value, schema]

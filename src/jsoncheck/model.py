"""Data model for jsoncheck: Undefined, type tags and schema nodes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Union


# ---------------------------------------------------------------------------
# Undefined: singleton for absent keys and positions
# ---------------------------------------------------------------------------

class _UndefinedType:
    """Stands in for a key or index the input does not have."""

    _instance: _UndefinedType | None = None

    def __new__(cls) -> _UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Undefined"

    def __bool__(self) -> bool:
        return False


Undefined = _UndefinedType()


# ---------------------------------------------------------------------------
# TypeTag / Marker
# ---------------------------------------------------------------------------

class TypeTag(str, Enum):
    """Classification of a runtime value, as produced by ``classify``."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNDEFINED = "undefined"
    NULL = "null"
    FUNCTION = "function"
    SYMBOL = "symbol"
    SEQUENCE = "sequence"
    KEYED = "keyed"

    def __str__(self) -> str:
        return self.value


# Tag names used by older schemas
TYPE_ALIASES: dict[str, TypeTag] = {
    "arraylike": TypeTag.SEQUENCE,
    "objectlike": TypeTag.KEYED,
}


class Marker(Enum):
    EACH = "/each/"

    def __repr__(self) -> str:
        return "EACH"


EACH = Marker.EACH


# ---------------------------------------------------------------------------
# Schema nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TypeName:
    name: str


@dataclass(frozen=True, slots=True)
class Literal:
    value: Any


@dataclass(frozen=True, slots=True)
class TypeUnion:
    members: tuple[TypeName | Literal | Never, ...]


@dataclass(frozen=True, slots=True)
class ObjectSchema:
    fields: Mapping[Any, SchemaNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # private copy behind a read-only view
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))


@dataclass(frozen=True, slots=True)
class EachMarker:
    """The each marker. Only meaningful as the first entry of a candidate."""


@dataclass(frozen=True, slots=True)
class Never:
    """Matches nothing. Rejected schema pieces compile to this."""

    reason: str = ""


@dataclass(frozen=True, slots=True)
class EachClause:
    subs: tuple[SchemaNode, ...]


@dataclass(frozen=True, slots=True)
class TupleClause:
    items: tuple[SchemaNode, ...]


@dataclass(frozen=True, slots=True)
class WholeInputClause:
    node: SchemaNode


Clause = Union[EachClause, TupleClause, WholeInputClause]


@dataclass(frozen=True, slots=True)
class SequenceSchema:
    """A sequence schema with both of its readings resolved.

    ``clauses`` is the candidate-list reading, used when the input is a
    sequence.  ``entries`` is the alternation reading, used for any other
    input: each entry is applied to the whole value.  Both views share the
    same compiled nodes.
    """

    entries: tuple[SchemaNode, ...]
    clauses: tuple[Clause, ...]

    @property
    def is_each(self) -> bool:
        return bool(self.entries) and isinstance(self.entries[0], EachMarker)


SchemaNode = Union[
    TypeName, Literal, TypeUnion, ObjectSchema, SequenceSchema, EachMarker, Never
]

NODE_TYPES = (TypeName, Literal, TypeUnion, ObjectSchema, SequenceSchema, EachMarker, Never)

"""jsoncheck: structural validation of JSON-like values against shape schemas."""

from .builders import each, literal, one_of, optional, union
from .classify import classify
from .compiler import compile_schema
from .config import ValidatorConfig, load_config
from .errors import ConfigError, DocumentError, JSONCheckError, SchemaError
from .evaluator import Validator, match, validate
from .model import (
    EACH,
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
    Undefined,
    WholeInputClause,
)

__all__ = [
    "validate",
    "match",
    "compile_schema",
    "Validator",
    "classify",
    "each",
    "literal",
    "one_of",
    "optional",
    "union",
    "ValidatorConfig",
    "load_config",
    "EACH",
    "Undefined",
    "TypeTag",
    "SchemaNode",
    "TypeName",
    "Literal",
    "TypeUnion",
    "ObjectSchema",
    "SequenceSchema",
    "EachClause",
    "TupleClause",
    "WholeInputClause",
    "EachMarker",
    "Never",
    "JSONCheckError",
    "SchemaError",
    "ConfigError",
    "DocumentError",
]

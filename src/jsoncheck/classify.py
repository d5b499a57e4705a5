"""Runtime value classification."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from enum import Enum

from .model import TypeTag, _UndefinedType

_TEXT_TYPES = (str, bytes, bytearray)


def classify(value: object) -> str:
    """Return the type tag for *value*.

    - ``Undefined`` → undefined, ``None`` → null
    - ``bool`` → boolean (checked before numbers)
    - numbers → number, ``str`` → string
    - enum members → symbol
    - mappings → keyed, non-text sequences → sequence (empty ones included)
    - other callables → function
    - anything else → its class name, e.g. ``"datetime"``
    """
    if isinstance(value, _UndefinedType):
        return TypeTag.UNDEFINED
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Enum):
        return TypeTag.SYMBOL
    if isinstance(value, numbers.Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.KEYED
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return TypeTag.SEQUENCE
    if callable(value):
        return TypeTag.FUNCTION
    return type(value).__name__


def is_sequence(value: object) -> bool:
    return classify(value) == TypeTag.SEQUENCE


def is_keyed(value: object) -> bool:
    return classify(value) == TypeTag.KEYED

"""Validator configuration and TOML loading."""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from .errors import ConfigError

logger = logging.getLogger(__name__)

LITERAL_QUOTE_MODES: Final[frozenset[str]] = frozenset({"all", "enclosing"})
CONFIG_TABLE: Final[str] = "jsoncheck"
# compiling uses about four frames per nesting level; stay well inside the
# interpreter's default recursion limit of 1000
MAX_DEPTH_LIMIT: Final[int] = 150
_PYPROJECT_TABLES: Final[frozenset[str]] = frozenset({"tool", "project", "build-system"})

_FIELD_TYPES: Final[dict[str, type]] = {
    "max_depth": int,
    "strict": bool,
    "literal_quotes": str,
}


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Options shared by the compiler and the evaluator.

    max_depth
        Deepest schema nesting the compiler accepts, at most
        ``MAX_DEPTH_LIMIT``.  Evaluation recurses along the schema, so this
        also bounds the evaluator's stack.
    strict
        Raise ``SchemaError`` for malformed schema pieces instead of
        compiling them to a node that never matches.
    literal_quotes
        ``"all"`` strips every double quote from a literal schema string;
        ``"enclosing"`` strips exactly one enclosing pair.
    """

    max_depth: int = 100
    strict: bool = False
    literal_quotes: str = "all"

    def __post_init__(self) -> None:
        for name, expected in _FIELD_TYPES.items():
            value = getattr(self, name)
            # bool is an int subclass; keep max_depth=True out
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(
                    f"{name} must be {expected.__name__}, got {type(value).__name__}"
                )
        if not 1 <= self.max_depth <= MAX_DEPTH_LIMIT:
            raise ConfigError(
                f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {self.max_depth}"
            )
        if self.literal_quotes not in LITERAL_QUOTE_MODES:
            raise ConfigError(
                f"literal_quotes must be one of {sorted(LITERAL_QUOTE_MODES)}, "
                f"got {self.literal_quotes!r}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ValidatorConfig:
        unknown = sorted(set(data) - set(_FIELD_TYPES))
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        return cls(**dict(data))

    def replace(self, **overrides: Any) -> ValidatorConfig:
        """Return a copy with *overrides* applied; ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = sorted(set(changes) - set(_FIELD_TYPES))
        if unknown:
            raise ConfigError(f"unknown config keys: {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)


DEFAULT_CONFIG: Final[ValidatorConfig] = ValidatorConfig()


def load_config(path: str | Path) -> ValidatorConfig:
    """Load a ``ValidatorConfig`` from a TOML file.

    Looks for ``[tool.jsoncheck]`` (pyproject.toml), then ``[jsoncheck]``,
    and otherwise reads the top-level table of a dedicated config file.
    """
    config_path = Path(path)
    try:
        with config_path.open("rb") as fh:
            payload = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {config_path}") from exc
    except OSError as exc:
        raise ConfigError(f"cannot read config file {config_path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {config_path}: {exc}") from exc

    table = _select_table(payload)
    if not isinstance(table, Mapping):
        raise ConfigError(f"{CONFIG_TABLE} config in {config_path} must be a table")
    logger.debug("loaded config from %s: %s", config_path, dict(table))
    return ValidatorConfig.from_mapping(table)


def _select_table(payload: Mapping[str, Any]) -> Any:
    tool = payload.get("tool")
    if isinstance(tool, Mapping) and CONFIG_TABLE in tool:
        return tool[CONFIG_TABLE]
    if CONFIG_TABLE in payload:
        return payload[CONFIG_TABLE]
    if _PYPROJECT_TABLES & set(payload):
        # a pyproject.toml without our table
        return {}
    return payload

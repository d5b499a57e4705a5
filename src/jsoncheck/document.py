"""Loading data and schema documents from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .errors import DocumentError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def load_document(path: str | Path) -> Any:
    """Read *path* and return its parsed content.

    ``.yaml`` / ``.yml`` files go through ``yaml.safe_load``; everything else
    is parsed as JSON.
    """
    doc_path = Path(path)
    try:
        text = doc_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentError(f"cannot read {doc_path}: {exc}") from exc

    if doc_path.suffix.lower() in YAML_SUFFIXES:
        return loads_yaml(text, source=str(doc_path))
    return loads_json(text, source=str(doc_path))


def loads_json(text: str, *, source: str = "<string>") -> Any:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"invalid JSON in {source}: {exc}") from exc
    logger.debug("loaded JSON document %s", source)
    return data


def loads_yaml(text: str, *, source: str = "<string>") -> Any:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentError(f"invalid YAML in {source}: {exc}") from exc
    logger.debug("loaded YAML document %s", source)
    return data

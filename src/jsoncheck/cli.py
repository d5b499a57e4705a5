"""``jsoncheck`` command line entry point.

Usage::

    jsoncheck data.json schema.yaml
    jsoncheck data.json schema.json --strict --literal-quotes enclosing
    jsoncheck data.json schema.json --config pyproject.toml -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import IO

from .config import DEFAULT_CONFIG, LITERAL_QUOTE_MODES, ValidatorConfig, load_config
from .document import load_document
from .errors import ConfigError, DocumentError, SchemaError
from .evaluator import Validator

logger = logging.getLogger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsoncheck",
        description="Check a JSON/YAML document against a jsoncheck schema.",
    )
    parser.add_argument("data", help="document to check (JSON, or YAML for .yaml/.yml)")
    parser.add_argument("schema", help="schema document (JSON, or YAML for .yaml/.yml)")
    parser.add_argument("--config", help="TOML file with a [jsoncheck] or [tool.jsoncheck] table")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="fail on malformed schemas instead of treating them as non-matching",
    )
    parser.add_argument("--literal-quotes", choices=sorted(LITERAL_QUOTE_MODES))
    parser.add_argument("--max-depth", type=int)
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    return parser


def _resolve_config(args: argparse.Namespace) -> ValidatorConfig:
    """File values first, then command line flags."""
    base = load_config(args.config) if args.config else DEFAULT_CONFIG
    return base.replace(
        strict=args.strict,
        literal_quotes=args.literal_quotes,
        max_depth=args.max_depth,
    )


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def run(argv: Sequence[str] | None = None, dest: IO[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    out = dest if dest is not None else sys.stdout
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = _resolve_config(args)
        schema = load_document(args.schema)
        data = load_document(args.data)
        validator = Validator(schema, config=config)
    except (ConfigError, DocumentError, SchemaError) as exc:
        logger.error("%s", exc)
        return EXIT_ERROR

    if validator.check(data):
        print("valid", file=out)
        return EXIT_VALID
    print("invalid", file=out)
    return EXIT_INVALID


def main() -> None:
    """``jsoncheck`` / ``python -m jsoncheck``."""
    sys.exit(run())


if __name__ == "__main__":
    main()

"""Validate a JSON document file against a JSON schema file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .config import ValidatorConfig, ValidatorConfigError
from .parser import SchemaError, parse_schema
from .validator import validate

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="schemacheck", description=__doc__)
    parser.add_argument("--schema", required=True, help="Path to the schema JSON file")
    parser.add_argument("--data", required=True, help="Path to the JSON document to validate")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Stop descending below this nesting depth (default: unbounded)",
    )
    return parser.parse_args(argv)


def load_json(path: Path, label: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise SystemExit(f"Could not read {label} file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {label} file {path}: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = ValidatorConfig.from_env().with_max_depth(args.max_depth)
    except ValidatorConfigError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc
    logging.basicConfig(level=config.logging_level, format="%(levelname)s %(name)s: %(message)s")

    schema_path = Path(args.schema).resolve()
    data_path = Path(args.data).resolve()

    try:
        schema = parse_schema(load_json(schema_path, "schema"))
    except SchemaError as exc:
        raise SystemExit(f"Schema {schema_path.name} rejected: {exc}") from exc
    data = load_json(data_path, "data")

    logger.debug("Validating %s against %s", data_path, schema_path)
    result = validate(data, schema, max_depth=config.max_depth)
    if result.is_valid:
        print(f"PASS {data_path.name} -> {schema_path.name}")
        return 0

    for message in result.messages():
        print(f"FAIL {message}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())

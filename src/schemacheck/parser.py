"""Schema source resolution and structural checks run before validation."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from .model import child_path, display_path
from .predicates import is_number

logger = logging.getLogger(__name__)


class SchemaError(ValueError):
    """Raised when a schema cannot be used for validation."""


class SchemaParseError(SchemaError):
    """Raised when schema text is not valid JSON."""


class SchemaTypeError(SchemaError):
    """Raised when the schema argument is neither JSON text nor a mapping."""


class SchemaStructureError(SchemaError):
    """Raised on the first malformed keyword found in a schema."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = display_path(path)
        self.reason = reason
        super().__init__(reason)


def resolve_schema(schema: Any) -> Any:
    """Return a parsed schema from JSON text or an already-parsed mapping."""
    if isinstance(schema, str):
        try:
            return json.loads(schema)
        except json.JSONDecodeError as exc:
            raise SchemaParseError(f"Invalid schema JSON: {exc}") from exc

    if isinstance(schema, Mapping):
        return schema

    raise SchemaTypeError("Schema must be a valid JSON object or string")


def _is_non_negative_integer(value: Any) -> bool:
    if not is_number(value):
        return False
    if isinstance(value, float) and not value.is_integer():
        return False
    return value >= 0


def check_schema_structure(schema: Any, path: str = "") -> None:
    """
    Verify keyword shapes of ``schema`` and every nested schema node.

    Fails fast: the first problem found raises ``SchemaStructureError`` with
    the path of the offending node.
    """
    where = display_path(path)

    if not isinstance(schema, Mapping):
        raise SchemaStructureError(path, f"Schema at {where} must be an object")

    properties = schema.get("properties")
    if properties:
        if not isinstance(properties, Mapping):
            raise SchemaStructureError(path, f"Properties at {where} must be an object")
        for name, property_schema in properties.items():
            check_schema_structure(property_schema, child_path(path, name))

    items = schema.get("items")
    if items:
        check_schema_structure(items, child_path(path, "items"))

    if "required" in schema:
        required = schema["required"]
        if not isinstance(required, list):
            raise SchemaStructureError(path, f"Required at {where} must be an array")
        for name in required:
            if not isinstance(name, str):
                raise SchemaStructureError(path, f"Required items at {where} must be strings")

    if "enum" in schema and not isinstance(schema["enum"], list):
        raise SchemaStructureError(path, f"Enum at {where} must be an array")

    if "minimum" in schema and not is_number(schema["minimum"]):
        raise SchemaStructureError(path, f"Minimum at {where} must be a number")

    if "maximum" in schema and not is_number(schema["maximum"]):
        raise SchemaStructureError(path, f"Maximum at {where} must be a number")

    if "minLength" in schema and not _is_non_negative_integer(schema["minLength"]):
        raise SchemaStructureError(path, f"MinLength at {where} must be a non-negative integer")

    if "maxLength" in schema and not _is_non_negative_integer(schema["maxLength"]):
        raise SchemaStructureError(path, f"MaxLength at {where} must be a non-negative integer")

    if "pattern" in schema:
        pattern = schema["pattern"]
        try:
            re.compile(pattern)
        except (re.error, TypeError) as exc:
            raise SchemaStructureError(
                path, f"Invalid regex pattern at {where}: {pattern}"
            ) from exc


def parse_schema(schema: Any) -> Any:
    """Resolve ``schema`` and check its structure, returning the parsed schema."""
    parsed = resolve_schema(schema)
    try:
        check_schema_structure(parsed)
    except SchemaStructureError as exc:
        logger.debug("Rejected schema at %s: %s", exc.path, exc.reason)
        raise
    return parsed

"""Recursive validation of JSON-like data against a schema node."""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping

from .model import ValidationResult, Violation, child_path, display_path, index_path
from .predicates import is_number, matches_format, matches_type, deep_equal, type_name_of

logger = logging.getLogger(__name__)


def format_number(value: Any) -> str:
    """Render numbers the way they appear in JSON text (``2.0`` becomes ``2``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _compact_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def _is_index(name: Any) -> bool:
    return isinstance(name, str) and name.isascii() and name.isdigit() and str(int(name)) == name


def _has_key(data: Any, name: str) -> bool:
    """Key lookup that keeps a present ``None`` distinct from an absent key.

    Lists are keyed by their string indices plus ``length``.
    """
    if isinstance(data, Mapping):
        return name in data
    if isinstance(data, list):
        if name == "length":
            return True
        return _is_index(name) and int(name) < len(data)
    return False


def _child_value(data: Any, name: str) -> Any:
    if isinstance(data, list):
        if name == "length":
            return len(data)
        return data[int(name)]
    return data[name]


def validate_node(
    data: Any,
    schema: Mapping[str, Any],
    path: str,
    errors: list[Violation],
    *,
    depth: int = 0,
    max_depth: int | None = None,
) -> bool:
    """
    Validate ``data`` against one schema node, appending to ``errors``.

    Checks run in a fixed order: type, required, properties, items, enum,
    numeric bounds, string length and pattern, format. A type mismatch stops
    all later checks for this node; every other check runs regardless of the
    ones before it.

    Returns True when this call (including its recursion) added no violation.
    """
    start = len(errors)
    here = display_path(path)

    if not isinstance(schema, Mapping):
        return True

    if max_depth is not None and depth > max_depth:
        errors.append(Violation(here, f"Maximum validation depth {max_depth} exceeded"))
        return False

    schema_type = schema.get("type")
    if schema_type and not matches_type(data, schema_type):
        errors.append(
            Violation(here, f"Expected type {schema_type}, got {type_name_of(data)}")
        )
        return False

    required = schema.get("required")
    if isinstance(required, list):
        for name in required:
            if data is None or not _has_key(data, name):
                errors.append(
                    Violation(child_path(path, name), f"Missing required property '{name}'")
                )

    properties = schema.get("properties")
    if isinstance(properties, Mapping) and data is not None:
        for name, property_schema in properties.items():
            if _has_key(data, name):
                validate_node(
                    _child_value(data, name),
                    property_schema,
                    child_path(path, name),
                    errors,
                    depth=depth + 1,
                    max_depth=max_depth,
                )

    items = schema.get("items")
    if schema_type == "array" and items and isinstance(data, list):
        for index, item in enumerate(data):
            validate_node(
                item,
                items,
                index_path(path, index),
                errors,
                depth=depth + 1,
                max_depth=max_depth,
            )

    enum = schema.get("enum")
    if isinstance(enum, list) and not any(deep_equal(member, data) for member in enum):
        errors.append(
            Violation(here, f"Value must be one of the enum values: {_compact_json(enum)}")
        )

    if schema_type in ("number", "integer") and is_number(data):
        minimum = schema.get("minimum")
        if is_number(minimum) and data < minimum:
            errors.append(
                Violation(
                    here,
                    f"Value {format_number(data)} is less than minimum {format_number(minimum)}",
                )
            )
        maximum = schema.get("maximum")
        if is_number(maximum) and data > maximum:
            errors.append(
                Violation(
                    here,
                    f"Value {format_number(data)} is greater than maximum {format_number(maximum)}",
                )
            )

    if schema_type == "string" and isinstance(data, str):
        min_length = schema.get("minLength")
        if min_length is not None and len(data) < min_length:
            errors.append(
                Violation(
                    here,
                    f"String length {len(data)} is less than minLength {format_number(min_length)}",
                )
            )
        max_length = schema.get("maxLength")
        if max_length is not None and len(data) > max_length:
            errors.append(
                Violation(
                    here,
                    f"String length {len(data)} is greater than maxLength {format_number(max_length)}",
                )
            )
        pattern = schema.get("pattern")
        if pattern and re.search(pattern, data) is None:
            errors.append(Violation(here, f"String does not match pattern: {pattern}"))

    format_name = schema.get("format")
    if format_name and schema_type == "string" and not matches_format(data, format_name):
        errors.append(Violation(here, f"Value does not match format: {format_name}"))

    return len(errors) == start


def validate(
    data: Any,
    schema: Mapping[str, Any],
    *,
    max_depth: int | None = None,
) -> ValidationResult:
    """Validate ``data`` against ``schema`` and collect every violation.

    ``schema`` is expected to have passed ``check_schema_structure``. The call
    never raises for such a schema, whatever the data.
    """
    errors: list[Violation] = []
    validate_node(data, schema, "", errors, max_depth=max_depth)
    result = ValidationResult.from_violations(errors)
    if not result.is_valid:
        logger.debug("Validation found %d violation(s)", len(result.violations))
    return result

"""Pass/fail wrapper that combines schema parsing and validation."""

from __future__ import annotations

import logging
import math
from typing import Any

from .parser import SchemaError, parse_schema
from .predicates import is_number
from .validator import validate

logger = logging.getLogger(__name__)

parse_validation_schema = parse_schema


def _is_missing(value: Any) -> bool:
    """Empty containers count as present data; falsy scalars do not."""
    if value is None or value is False or value == "":
        return True
    if is_number(value):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def _failure(message: str) -> dict[str, Any]:
    return {"valid": False, "error": message}


def validate_document(*, schema: Any, data: Any) -> bool | dict[str, Any]:
    """
    Validate ``data`` against ``schema`` given as JSON text or a mapping.

    Returns True on success. Any schema problem, missing data or violation is
    returned as ``{"valid": False, "error": <message>}``; violations are
    rendered as ``"<path>: <message>"`` and joined with commas.
    """
    try:
        parsed = parse_schema(schema)
    except SchemaError as exc:
        return _failure(str(exc))

    if parsed is None:
        return _failure("Schema is required")
    if _is_missing(data):
        return _failure("Data is required")

    result = validate(data, parsed)
    if not result.is_valid:
        logger.info("Document rejected with %d violation(s)", len(result.violations))
        return _failure(",".join(result.messages()))
    return True

"""Structural validation of JSON-like data against declarative schemas."""

from .config import ValidatorConfig, ValidatorConfigError
from .facade import parse_validation_schema, validate_document
from .model import ValidationResult, Violation
from .parser import (
    SchemaError,
    SchemaParseError,
    SchemaStructureError,
    SchemaTypeError,
    check_schema_structure,
    parse_schema,
    resolve_schema,
)
from .predicates import deep_equal, matches_format, matches_type
from .validator import validate, validate_node

__all__ = [
    "SchemaError",
    "SchemaParseError",
    "SchemaStructureError",
    "SchemaTypeError",
    "ValidationResult",
    "ValidatorConfig",
    "ValidatorConfigError",
    "Violation",
    "check_schema_structure",
    "deep_equal",
    "matches_format",
    "matches_type",
    "parse_schema",
    "parse_validation_schema",
    "resolve_schema",
    "validate",
    "validate_document",
    "validate_node",
]

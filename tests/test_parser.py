"""Unit tests for schema resolution and structural checks."""

from __future__ import annotations

import unittest

from schemacheck.parser import (
    SchemaError,
    SchemaParseError,
    SchemaStructureError,
    SchemaTypeError,
    check_schema_structure,
    parse_schema,
    resolve_schema,
)


class ResolveSchemaTests(unittest.TestCase):
    def test_parses_json_text(self) -> None:
        self.assertEqual(resolve_schema('{"type": "string"}'), {"type": "string"})

    def test_returns_mapping_unchanged(self) -> None:
        schema = {"type": "number"}
        self.assertIs(resolve_schema(schema), schema)

    def test_rejects_invalid_json(self) -> None:
        with self.assertRaisesRegex(SchemaParseError, "Invalid schema JSON"):
            resolve_schema("{type: string}")

    def test_rejects_other_argument_types(self) -> None:
        for value in (None, 42, ["type"]):
            with self.assertRaisesRegex(SchemaTypeError, "must be a valid JSON object or string"):
                resolve_schema(value)

    def test_errors_share_a_value_error_base(self) -> None:
        self.assertTrue(issubclass(SchemaParseError, SchemaError))
        self.assertTrue(issubclass(SchemaStructureError, ValueError))


class CheckSchemaStructureTests(unittest.TestCase):
    def assertStructureError(self, schema: object, path: str, reason: str) -> None:
        with self.assertRaises(SchemaStructureError) as ctx:
            check_schema_structure(schema)
        self.assertEqual(ctx.exception.path, path)
        self.assertEqual(ctx.exception.reason, reason)
        self.assertEqual(str(ctx.exception), reason)

    def test_accepts_well_formed_schema(self) -> None:
        check_schema_structure(
            {
                "type": "object",
                "required": ["tags"],
                "properties": {
                    "tags": {"type": "array", "items": {"type": "string", "pattern": "^[a-z]+$"}},
                    "score": {"type": "number", "minimum": 0, "maximum": 1.5},
                    "code": {"type": "string", "minLength": 0, "maxLength": 4},
                    "kind": {"enum": ["a", None]},
                },
            }
        )

    def test_root_must_be_an_object(self) -> None:
        self.assertStructureError([], "root", "Schema at root must be an object")

    def test_properties_must_be_an_object(self) -> None:
        self.assertStructureError(
            {"properties": ["a"]}, "root", "Properties at root must be an object"
        )

    def test_nested_property_path(self) -> None:
        schema = {"properties": {"owner": {"properties": {"email": {"required": "email"}}}}}
        self.assertStructureError(
            schema, "owner.email", "Required at owner.email must be an array"
        )

    def test_items_path(self) -> None:
        schema = {"properties": {"tags": {"items": {"minLength": -1}}}}
        self.assertStructureError(
            schema, "tags.items", "MinLength at tags.items must be a non-negative integer"
        )

    def test_required_entries_must_be_strings(self) -> None:
        self.assertStructureError(
            {"required": ["a", 1]}, "root", "Required items at root must be strings"
        )

    def test_enum_must_be_an_array(self) -> None:
        self.assertStructureError({"enum": "a"}, "root", "Enum at root must be an array")

    def test_bounds_must_be_numbers(self) -> None:
        self.assertStructureError({"minimum": "1"}, "root", "Minimum at root must be a number")
        self.assertStructureError({"maximum": True}, "root", "Maximum at root must be a number")

    def test_length_bounds_must_be_non_negative_integers(self) -> None:
        self.assertStructureError(
            {"maxLength": 1.5}, "root", "MaxLength at root must be a non-negative integer"
        )
        check_schema_structure({"maxLength": 2.0})

    def test_pattern_must_compile(self) -> None:
        self.assertStructureError({"pattern": "(["}, "root", "Invalid regex pattern at root: ([")

    def test_fails_fast_on_first_problem(self) -> None:
        self.assertStructureError(
            {"required": "a", "enum": "b"}, "root", "Required at root must be an array"
        )


class ParseSchemaTests(unittest.TestCase):
    def test_resolves_and_checks(self) -> None:
        self.assertEqual(parse_schema('{"required": ["id"]}'), {"required": ["id"]})

    def test_json_text_that_is_not_an_object_is_rejected(self) -> None:
        with self.assertRaisesRegex(SchemaStructureError, "Schema at root must be an object"):
            parse_schema("[1, 2]")


if __name__ == "__main__":
    unittest.main()

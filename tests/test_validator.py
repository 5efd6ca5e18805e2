"""Tests for the compiled validator and its result types."""

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import jsonschema
import pytest

from conftest import NAME_SCHEMA, REQUIRED_NAME_SCHEMA
from validate_json_schema.errors import (
    ErrorKind,
    FileReadError,
    JsonParseError,
    SchemaCompilationError,
    ValidationFailedError,
    YamlParseError,
)
from validate_json_schema.validator import (
    ValidationError,
    ValidationResult,
    Validator,
    format_location,
)

SERVICES_SCHEMA = {
    "type": "object",
    "properties": {
        "services": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {"name": {"type": "string"}},
            },
        }
    },
}


@pytest.fixture
def person_validator() -> Validator:
    """Validator requiring a string name and a non-negative age."""
    return Validator.compile(REQUIRED_NAME_SCHEMA)


# Locations
@pytest.mark.parametrize(
    "path,expected",
    [
        ((), "root"),
        (("name",), "name"),
        ((0,), "[0]"),
        (("services", 0, "name"), "services[0].name"),
        (("matrix", 0, 1), "matrix[0][1]"),
        (("a", "b", "c"), "a.b.c"),
    ],
)
def test_format_location(path, expected: str) -> None:
    """Test dot and bracket rendering of document paths."""
    assert format_location(path) == expected


def test_validation_error_str() -> None:
    """Test a single error renders as location and message."""
    error = ValidationError(path=("age",), message="-5 is less than the minimum of 0")
    assert error.location == "age"
    assert str(error) == "age: -5 is less than the minimum of 0"


# Compilation
def test_compile_valid_schema() -> None:
    """Test compiling schema text."""
    validator = Validator.compile(NAME_SCHEMA)
    assert validator.schema == json.loads(NAME_SCHEMA)


@pytest.mark.parametrize(
    "schema",
    [
        {"type": "invalid_type"},
        {"type": "object", "required": "name"},
        {"minimum": "zero"},
        {"properties": {"name": {"type": 42}}},
    ],
)
def test_invalid_schema_rejected(schema) -> None:
    """Test that structurally invalid schemas fail to compile."""
    with pytest.raises(SchemaCompilationError) as exc_info:
        Validator(schema)
    assert exc_info.value.kind is ErrorKind.SCHEMA_COMPILATION
    assert str(exc_info.value).startswith("Invalid schema: ")


def test_compile_malformed_schema_text() -> None:
    """Test that schema text must be JSON."""
    with pytest.raises(JsonParseError):
        Validator.compile("{ invalid json")
    with pytest.raises(JsonParseError):
        Validator.compile("type: object")


def test_schema_is_copied() -> None:
    """Test that later changes to the caller's schema do not affect the validator."""
    schema = {"type": "object", "properties": {"name": {"type": "string"}}}
    validator = Validator(schema)
    schema["properties"]["name"]["type"] = "integer"
    validator.schema["properties"]["name"]["type"] = "integer"

    assert validator.validate({"name": "Alice"}).is_valid


# Validation
def test_valid_yaml(person_validator: Validator) -> None:
    """Test a document that satisfies the schema."""
    result = person_validator.validate_yaml("name: Alice\nage: 30")
    assert result.is_valid
    assert result.errors == ()
    assert result.message == ""
    result.raise_for_errors()


def test_missing_required_property_reported_at_root(person_validator: Validator) -> None:
    """Test that a missing top-level property is reported at the root."""
    result = person_validator.validate_yaml("age: 3")
    assert not result.is_valid
    assert len(result.errors) == 1
    assert result.errors[0].keyword == "required"
    assert result.message == "root: 'name' is a required property"


def test_nested_location() -> None:
    """Test that nested errors carry the full path."""
    result = Validator(SERVICES_SCHEMA).validate_yaml("services:\n  - name: 42\n")
    assert [error.location for error in result.errors] == ["services[0].name"]
    assert result.errors[0].path == ("services", 0, "name")
    assert result.message == "services[0].name: 42 is not of type 'string'"


def test_multiple_errors_aggregated_in_evaluator_order(
    person_validator: Validator,
) -> None:
    """Test that every violation is reported in the evaluator's order."""
    instance = {"age": -5}
    result = person_validator.validate(instance)

    expected = [
        f"{format_location(tuple(e.absolute_path))}: {e.message}"
        for e in jsonschema.Draft7Validator(
            json.loads(REQUIRED_NAME_SCHEMA)
        ).iter_errors(instance)
    ]
    assert len(expected) == 2
    assert [str(error) for error in result.errors] == expected
    assert result.message == "2 validation errors: " + "; ".join(expected)
    assert "root: 'name' is a required property" in result.message
    assert "age: -5 is less than the minimum of 0" in result.message


def test_raise_for_errors(person_validator: Validator) -> None:
    """Test that failures surface as ValidationFailedError."""
    result = person_validator.validate_yaml("name: 123")
    with pytest.raises(ValidationFailedError) as exc_info:
        result.raise_for_errors()

    error = exc_info.value
    assert error.kind is ErrorKind.VALIDATION_FAILED
    assert error.errors == result.errors
    assert error.detail == result.message
    assert str(error) == f"Validation failed: {result.message}"


def test_validation_is_repeatable(person_validator: Validator) -> None:
    """Test that validating the same document twice gives the same result."""
    content = "name: 7\nage: -1\n"
    assert person_validator.validate_yaml(content) == person_validator.validate_yaml(
        content
    )


def test_null_document(person_validator: Validator) -> None:
    """Test that an empty YAML document validates as null."""
    result = person_validator.validate_yaml("")
    assert result.message == "root: None is not of type 'object'"


def test_yaml_words_validate_as_strings() -> None:
    """Test that yes/on are strings, not booleans."""
    validator = Validator(
        {"type": "object", "properties": {"flag": {"type": "string"}}}
    )
    assert validator.validate_yaml("flag: yes").is_valid
    assert validator.validate_yaml("flag: on").is_valid
    assert not validator.validate_yaml("flag: true").is_valid


def test_formats_are_checked() -> None:
    """Test that format assertions are enforced."""
    validator = Validator({"type": "string", "format": "email"})
    assert validator.validate("john@example.com").is_valid
    result = validator.validate("not-an-email")
    assert not result.is_valid
    assert result.errors[0].keyword == "format"


def test_local_refs_are_resolved() -> None:
    """Test that ``#/definitions`` references are followed."""
    validator = Validator(
        {
            "type": "array",
            "items": {"$ref": "#/definitions/positive"},
            "definitions": {"positive": {"type": "integer", "minimum": 1}},
        }
    )
    assert validator.validate_json("[1, 2, 3]").is_valid
    result = validator.validate_json("[1, 0]")
    assert result.message == "[1]: 0 is less than the minimum of 1"


def test_validate_json(person_validator: Validator) -> None:
    """Test JSON text validation."""
    assert person_validator.validate_json('{"name": "Alice", "age": 30}').is_valid
    assert not person_validator.validate_json('{"name": 123}').is_valid
    with pytest.raises(JsonParseError):
        person_validator.validate_json("name: Alice")


def test_validate_yaml_parse_error(person_validator: Validator) -> None:
    """Test that malformed YAML is a parse error, not a validation failure."""
    with pytest.raises(YamlParseError):
        person_validator.validate_yaml("invalid: yaml: content:\n  - x\n    y: z")


def test_validate_content_detects_format() -> None:
    """Test content detection for JSON and YAML text."""
    validator = Validator.compile(NAME_SCHEMA)
    assert validator.validate_content('{"name": "test"}').is_valid
    assert validator.validate_content("name: test").is_valid
    assert not validator.validate_content('["item1", "item2"]').is_valid
    with pytest.raises(JsonParseError):
        validator.validate_content("{ invalid json")


# Files
def test_validate_file_uses_extension(write_file) -> None:
    """Test that the file extension chooses the parser."""
    validator = Validator.compile(NAME_SCHEMA)

    assert validator.validate_file(write_file("doc.JSON", '{"name": "x"}')).is_valid
    assert validator.validate_file(write_file("doc.yml", "name: x")).is_valid
    # YAML extension with JSON-looking content still goes through the YAML parser
    assert validator.validate_file(write_file("doc.yaml", '{"name": "x"}')).is_valid

    with pytest.raises(JsonParseError):
        validator.validate_file(write_file("bad.json", "name: x"))


def test_validate_file_falls_back_to_content(write_file) -> None:
    """Test content detection for unknown extensions."""
    validator = Validator.compile(NAME_SCHEMA)
    assert validator.validate_file(write_file("doc.txt", '{"name": "x"}')).is_valid
    assert validator.validate_file(write_file("doc", "name: x")).is_valid
    with pytest.raises(JsonParseError):
        validator.validate_file(write_file("doc.conf", "{ name: x"))


def test_validate_yaml_file_ignores_extension(write_file) -> None:
    """Test that the YAML file variant always parses as YAML."""
    validator = Validator.compile(NAME_SCHEMA)
    assert validator.validate_yaml_file(write_file("doc.json", "name: test")).is_valid


def test_validate_missing_file(tmp_path: Path) -> None:
    """Test that a missing document is a read error."""
    validator = Validator.compile(NAME_SCHEMA)
    with pytest.raises(FileReadError):
        validator.validate_file(tmp_path / "missing.yaml")
    with pytest.raises(FileReadError):
        validator.validate_yaml_file(tmp_path / "missing.yaml")


# Concurrency
def test_shared_validator_across_threads(person_validator: Validator) -> None:
    """Test that one validator can be used from many threads at once."""
    documents = [f"name: user{i}\nage: {i}" for i in range(20)]
    documents += [f"name: {i}\nage: -{i + 1}" for i in range(20)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(person_validator.validate_yaml, documents))

    assert all(result.is_valid for result in results[:20])
    assert all(len(result.errors) == 2 for result in results[20:])
    assert results == [person_validator.validate_yaml(doc) for doc in documents]


def test_empty_result_message() -> None:
    """Test the default result is valid."""
    assert ValidationResult().is_valid
    assert ValidationResult().message == ""


@pytest.mark.parametrize(
    "yaml_text,json_text",
    [
        ("age: 25", '{"age": 25}'),
        ("name: Alice\nage: 30", '{"name": "Alice", "age": 30}'),
        ("name: [1, 2]\nage: -1", '{"name": [1, 2], "age": -1}'),
    ],
)
def test_yaml_and_json_equivalents_agree(
    person_validator: Validator, yaml_text: str, json_text: str
) -> None:
    """Test equivalent YAML and JSON documents give the same result."""
    yaml_result = person_validator.validate_content(yaml_text)
    json_result = person_validator.validate_content(json_text)
    assert yaml_result == json_result


def test_missing_name_in_both_formats(person_validator: Validator) -> None:
    """Test the required-property failure is at the root for YAML and JSON."""
    for content in ("age: 25", '{"age":25}', '  \n  {"age": 25}'):
        result = person_validator.validate_content(content)
        assert [str(error) for error in result.errors] == [
            "root: 'name' is a required property"
        ]


@pytest.mark.parametrize(
    "schema",
    [
        {"$ref": "#/definitions/missing"},
        {"properties": {"a": {"$ref": "#/definitions/missing"}}},
    ],
)
def test_dangling_reference_is_a_schema_error(schema) -> None:
    """Test that a reference to a missing definition fails as a schema error."""
    validator = Validator(schema)
    with pytest.raises(SchemaCompilationError) as exc_info:
        validator.validate_json('{"a": 1}')
    assert exc_info.value.kind is ErrorKind.SCHEMA_COMPILATION
    assert "Unresolvable reference" in str(exc_info.value)

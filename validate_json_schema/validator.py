"""Compiled JSON Schema validator for YAML and JSON documents."""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence, Tuple, Union

import jsonschema
from referencing.exceptions import Unresolvable

from .constants import ROOT_LOCATION
from .errors import SchemaCompilationError, ValidationFailedError
from .formats import detect_content_format, resolve_document_format
from .parsing import parse_document, parse_json, parse_yaml, read_text_file

logger = logging.getLogger(__name__)

PathElement = Union[str, int]


def format_location(path: Sequence[PathElement]) -> str:
    """Render a document path in dot/bracket notation, e.g. ``services[0].name``."""
    if not path:
        return ROOT_LOCATION
    parts = []
    for element in path:
        if isinstance(element, int):
            parts.append(f"[{element}]")
        elif parts:
            parts.append(f".{element}")
        else:
            parts.append(str(element))
    return "".join(parts)


@dataclass(frozen=True)
class ValidationError:
    """A single schema violation with path information."""

    path: Tuple[PathElement, ...]
    message: str
    keyword: str = ""

    @property
    def location(self) -> str:
        return format_location(self.path)

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


@dataclass(frozen=True)
class ValidationResult:
    """All violations found by one validate call, in evaluator order."""

    errors: Tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """Whether the document satisfied the schema."""
        return not self.errors

    @property
    def message(self) -> str:
        """Aggregated error message; empty when valid.

        One error is reported as-is; several are reported as
        ``"<N> validation errors: "`` followed by the entries joined with ``"; "``.
        """
        if not self.errors:
            return ""
        if len(self.errors) == 1:
            return str(self.errors[0])
        joined = "; ".join(str(error) for error in self.errors)
        return f"{len(self.errors)} validation errors: {joined}"

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationFailedError` if any violation was found."""
        if self.errors:
            raise ValidationFailedError(self.errors, self.message)


class Validator:
    """A Draft 7 JSON Schema compiled once and reused for many documents.

    Construction fails with :class:`SchemaCompilationError` for an invalid
    schema, so every instance wraps a usable schema. Validation does not
    mutate the instance, so one validator may be shared between threads.

    Example:
        >>> validator = Validator.compile('{"type": "object"}')
        >>> validator.validate_yaml("name: Alice").is_valid
        True
    """

    def __init__(self, schema: Any) -> None:
        schema = copy.deepcopy(schema)
        try:
            jsonschema.Draft7Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise SchemaCompilationError(_describe_schema_error(e)) from e

        self._schema = schema
        self._validator = jsonschema.Draft7Validator(
            schema, format_checker=jsonschema.Draft7Validator.FORMAT_CHECKER
        )
        logger.debug("Compiled Draft 7 schema")

    @classmethod
    def compile(cls, schema_text: str) -> "Validator":
        """Parse ``schema_text`` as JSON and compile it.

        Raises:
            JsonParseError: If the text is not JSON
            SchemaCompilationError: If it is not a valid Draft 7 schema
        """
        return cls(parse_json(schema_text))

    @property
    def schema(self) -> Any:
        """A copy of the compiled schema document."""
        return copy.deepcopy(self._schema)

    def validate(self, value: Any) -> ValidationResult:
        """Validate a parsed document, collecting every violation.

        Raises:
            SchemaCompilationError: If the schema holds a reference that
                cannot be resolved
        """
        try:
            errors = tuple(
                ValidationError(
                    path=tuple(error.absolute_path),
                    message=error.message,
                    keyword=str(error.validator),
                )
                for error in self._validator.iter_errors(value)
            )
        except Unresolvable as e:
            # A $ref that points nowhere only surfaces once it is followed
            raise SchemaCompilationError(f"Unresolvable reference: {e}") from e
        if errors:
            logger.debug("Validation found %d error(s)", len(errors))
        return ValidationResult(errors)

    def validate_yaml(self, yaml_content: str) -> ValidationResult:
        """Parse YAML text and validate it."""
        return self.validate(parse_yaml(yaml_content))

    def validate_json(self, json_content: str) -> ValidationResult:
        """Parse JSON text and validate it."""
        return self.validate(parse_json(json_content))

    def validate_content(self, content: str) -> ValidationResult:
        """Validate text after detecting whether it is JSON or YAML."""
        return self.validate(parse_document(content, detect_content_format(content)))

    def validate_yaml_file(self, yaml_path: Union[str, Path]) -> ValidationResult:
        """Read a file and validate it as YAML regardless of its extension."""
        return self.validate_yaml(read_text_file(yaml_path))

    def validate_file(self, file_path: Union[str, Path]) -> ValidationResult:
        """Read a file and validate it.

        The format comes from the extension (``.json``, ``.yaml``, ``.yml``, any
        case) and falls back to content detection for other extensions.
        """
        content = read_text_file(file_path)
        document_format = resolve_document_format(file_path, content)
        logger.debug("Validating %s as %s", file_path, document_format.value)
        return self.validate(parse_document(content, document_format))


def _describe_schema_error(error: jsonschema.SchemaError) -> str:
    location = format_location(tuple(error.absolute_path))
    if location == ROOT_LOCATION:
        return error.message
    return f"{location}: {error.message}"


"""Error types raised by the validation engine.

Every failure surfaces as a subclass of :class:`ValidateJsonSchemaError`. Each
subclass carries its payload as attributes, and ``error.kind`` names the
variant so callers can dispatch on it without parsing messages.
"""

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence, Tuple, Union

if TYPE_CHECKING:
    from .validator import ValidationError


class ErrorKind(Enum):
    """The closed set of failure kinds."""

    FILE_READ = "file_read"
    YAML_PARSE = "yaml_parse"
    JSON_PARSE = "json_parse"
    SCHEMA_COMPILATION = "schema_compilation"
    VALIDATION_FAILED = "validation_failed"
    HTTP_REQUEST = "http_request"
    INVALID_URL = "invalid_url"
    CACHE_DIRECTORY = "cache_directory"


class ValidateJsonSchemaError(Exception):
    """Base exception for validate-json-schema errors."""

    kind: ErrorKind


class FileReadError(ValidateJsonSchemaError):
    """Raised when a schema or document file cannot be read."""

    kind = ErrorKind.FILE_READ

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read file {self.path}: {reason}")


class _ParseError(ValidateJsonSchemaError):
    """Shared shape of the two document parse errors."""

    format_name = ""

    def __init__(
        self, reason: str, line: Optional[int] = None, column: Optional[int] = None
    ):
        self.reason = reason
        self.line = line
        self.column = column
        location = f" at line {line} column {column}" if line is not None else ""
        super().__init__(f"Failed to parse {self.format_name}: {reason}{location}")


class YamlParseError(_ParseError):
    """Raised for malformed YAML text."""

    kind = ErrorKind.YAML_PARSE
    format_name = "YAML"


class JsonParseError(_ParseError):
    """Raised for malformed JSON text, including schema text."""

    kind = ErrorKind.JSON_PARSE
    format_name = "JSON"


class SchemaCompilationError(ValidateJsonSchemaError):
    """Raised when a document is not a valid Draft 7 JSON Schema."""

    kind = ErrorKind.SCHEMA_COMPILATION

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid schema: {reason}")


class ValidationFailedError(ValidateJsonSchemaError):
    """Raised when a document violates its schema.

    ``errors`` holds every violation in evaluator order; ``detail`` is the
    aggregated message.
    """

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, errors: Sequence["ValidationError"], detail: str):
        self.errors: Tuple["ValidationError", ...] = tuple(errors)
        self.detail = detail
        super().__init__(f"Validation failed: {detail}")


class HttpRequestError(ValidateJsonSchemaError):
    """Raised when fetching a remote schema fails."""

    kind = ErrorKind.HTTP_REQUEST

    def __init__(
        self, url: str, status_code: Optional[int] = None, reason: Optional[str] = None
    ):
        self.url = url
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"HTTP {status_code}: Failed to fetch schema from {url}"
        else:
            message = f"HTTP request to {url} failed: {reason}"
        super().__init__(message)


class InvalidUrlError(ValidateJsonSchemaError):
    """Raised for a syntactically malformed schema URL."""

    kind = ErrorKind.INVALID_URL

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Invalid URL {url!r}: {reason}")


class CacheDirectoryError(ValidateJsonSchemaError):
    """Raised when the schema cache directory cannot be resolved, written or removed."""

    kind = ErrorKind.CACHE_DIRECTORY

    def __init__(self, reason: str, path: Optional[Union[str, Path]] = None):
        self.reason = reason
        self.path = Path(path) if path is not None else None
        suffix = f" ({self.path})" if self.path is not None else ""
        super().__init__(f"Cache directory error: {reason}{suffix}")

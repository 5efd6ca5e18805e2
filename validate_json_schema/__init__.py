"""Validate YAML and JSON documents against JSON Schemas from files or URLs."""

__version__ = "0.1.0"

from .api import (  # noqa: E402
    clear_schema_cache,
    validate_content_with_schema,
    validate_file_with_schema_file,
    validate_file_with_schema_input,
    validate_json_with_schema,
    validate_yaml_file_with_schema_file,
    validate_yaml_file_with_schema_input,
    validate_yaml_with_schema,
)
from .cache import SchemaCache, default_cache_dir  # noqa: E402
from .errors import (  # noqa: E402
    CacheDirectoryError,
    ErrorKind,
    FileReadError,
    HttpRequestError,
    InvalidUrlError,
    JsonParseError,
    SchemaCompilationError,
    ValidateJsonSchemaError,
    ValidationFailedError,
    YamlParseError,
)
from .factory import ValidatorFactory  # noqa: E402
from .fetcher import SchemaFetcher  # noqa: E402
from .formats import DocumentFormat, SchemaSource  # noqa: E402
from .parsing import parse_json, parse_yaml  # noqa: E402
from .validator import ValidationError, ValidationResult, Validator  # noqa: E402

__all__ = [
    "__version__",
    "CacheDirectoryError",
    "DocumentFormat",
    "ErrorKind",
    "FileReadError",
    "HttpRequestError",
    "InvalidUrlError",
    "JsonParseError",
    "SchemaCache",
    "SchemaCompilationError",
    "SchemaFetcher",
    "SchemaSource",
    "ValidateJsonSchemaError",
    "ValidationError",
    "ValidationFailedError",
    "ValidationResult",
    "Validator",
    "ValidatorFactory",
    "YamlParseError",
    "clear_schema_cache",
    "default_cache_dir",
    "parse_json",
    "parse_yaml",
    "validate_content_with_schema",
    "validate_file_with_schema_file",
    "validate_file_with_schema_input",
    "validate_json_with_schema",
    "validate_yaml_file_with_schema_file",
    "validate_yaml_file_with_schema_input",
    "validate_yaml_with_schema",
]

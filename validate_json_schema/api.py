"""One-shot helpers for validating a single document.

Each helper compiles a fresh validator and raises
:class:`~validate_json_schema.errors.ValidationFailedError` when the document
does not satisfy the schema.
"""

from pathlib import Path
from typing import Optional, Union

from .cache import SchemaCache
from .factory import ValidatorFactory
from .validator import Validator

PathLike = Union[str, Path]


def validate_yaml_with_schema(yaml_content: str, schema_content: str) -> None:
    """Validate YAML text against JSON Schema text."""
    Validator.compile(schema_content).validate_yaml(yaml_content).raise_for_errors()


def validate_json_with_schema(json_content: str, schema_content: str) -> None:
    """Validate JSON text against JSON Schema text."""
    Validator.compile(schema_content).validate_json(json_content).raise_for_errors()


def validate_content_with_schema(content: str, schema_content: str) -> None:
    """Validate text of either format against JSON Schema text."""
    Validator.compile(schema_content).validate_content(content).raise_for_errors()


def validate_yaml_file_with_schema_file(
    yaml_path: PathLike, schema_path: PathLike
) -> None:
    """Validate a YAML file against a schema file."""
    validator = ValidatorFactory().from_file(schema_path)
    validator.validate_yaml_file(yaml_path).raise_for_errors()


def validate_file_with_schema_file(file_path: PathLike, schema_path: PathLike) -> None:
    """Validate a YAML or JSON file against a schema file."""
    validator = ValidatorFactory().from_file(schema_path)
    validator.validate_file(file_path).raise_for_errors()


def validate_yaml_file_with_schema_input(
    yaml_path: PathLike,
    schema_input: str,
    factory: Optional[ValidatorFactory] = None,
) -> None:
    """Validate a YAML file against a schema path or URL."""
    validator = (factory or ValidatorFactory()).from_input(schema_input)
    validator.validate_yaml_file(yaml_path).raise_for_errors()


def validate_file_with_schema_input(
    file_path: PathLike,
    schema_input: str,
    factory: Optional[ValidatorFactory] = None,
) -> None:
    """Validate a YAML or JSON file against a schema path or URL."""
    validator = (factory or ValidatorFactory()).from_input(schema_input)
    validator.validate_file(file_path).raise_for_errors()


def clear_schema_cache(cache_dir: Optional[PathLike] = None) -> None:
    """Remove every cached remote schema.

    Raises:
        CacheDirectoryError: If the cache directory cannot be resolved or removed
    """
    cache = SchemaCache(cache_dir) if cache_dir is not None else SchemaCache.default()
    cache.clear()

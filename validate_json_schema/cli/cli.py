"""Command-line interface: ``validate`` and ``clear-cache``."""

import logging
from pathlib import Path

import click

from validate_json_schema import __version__
from validate_json_schema.api import clear_schema_cache
from validate_json_schema.constants import DEFAULT_LOG_LEVEL, ENV_LOG_LEVEL
from validate_json_schema.env import get_env_var
from validate_json_schema.errors import (
    CacheDirectoryError,
    ValidateJsonSchemaError,
    ValidationFailedError,
)
from validate_json_schema.factory import ValidatorFactory
from validate_json_schema.formats import (
    SchemaSource,
    classify_schema_input,
    format_from_extension,
)

from .output import ClickEchoHandler, Style

logger = logging.getLogger(__name__)

PACKAGE_LOGGER = "validate_json_schema"


def _ensure_handler(target: logging.Logger) -> None:
    if not any(isinstance(h, ClickEchoHandler) for h in target.handlers):
        handler = ClickEchoHandler()
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        target.addHandler(handler)


def set_debug_logging(debug: bool) -> None:
    """Configure package logging; DEBUG when ``debug`` is set."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    _ensure_handler(package_logger)

    if debug:
        package_logger.setLevel(logging.DEBUG)
        # Show HTTP requests in debug mode
        http_logger = logging.getLogger("urllib3")
        _ensure_handler(http_logger)
        http_logger.setLevel(logging.DEBUG)
        click.echo(Style.info("Debug mode enabled - logging=DEBUG"), err=True)
    else:
        level = get_env_var(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL
        level = level.upper()
        if not isinstance(logging.getLevelName(level), int):
            level = DEFAULT_LOG_LEVEL
        package_logger.setLevel(level)
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def print_verbose_info(file_path: Path, schema_input: str) -> None:
    """Report where the schema comes from and how the document will be read."""
    if classify_schema_input(schema_input) is SchemaSource.REMOTE:
        click.echo(f"Using remote schema: {schema_input}")
    else:
        click.echo(f"Using local schema: {schema_input}")

    click.echo(f"Validating file: {file_path}")

    document_format = format_from_extension(file_path)
    file_type = document_format.value if document_format else "Auto-detected"
    click.echo(f"File type: {file_type}")


@click.group()
@click.version_option(version=__version__, prog_name="validate-json-schema")
@click.option("--debug", is_flag=True, help="Enable debug mode")
def cli(debug: bool) -> None:
    """Validate YAML and JSON files against JSON schemas.

    Schemas may be local files or http(s) URLs; remote schemas are cached.
    """
    set_debug_logging(debug)


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("schema")
@click.option(
    "-v", "--verbose", is_flag=True, help="Show details about the validation process"
)
def validate(file: Path, schema: str, verbose: bool) -> None:
    """Validate FILE against SCHEMA (a file path or an http(s) URL).

    The file format is taken from the extension (.json, .yaml, .yml) and
    otherwise detected from the content.
    """
    logger.debug("Validating %s against %s", file, schema)
    if verbose:
        print_verbose_info(file, schema)

    try:
        validator = ValidatorFactory().from_input(schema)
        validator.validate_file(file).raise_for_errors()
    except ValidationFailedError as e:
        click.echo(Style.error(f"Validation failed: {e.detail}"), err=True)
        raise SystemExit(1)
    except ValidateJsonSchemaError as e:
        logger.debug("Validation aborted: %s", e.kind.value)
        click.echo(Style.error(f"Error: {e}"), err=True)
        raise SystemExit(1)

    if verbose:
        click.echo(Style.success("Validation successful!"))
    else:
        click.echo(Style.success("Valid"))


@cli.command("clear-cache")
def clear_cache() -> None:
    """Remove all cached remote schemas."""
    try:
        clear_schema_cache()
    except CacheDirectoryError as e:
        click.echo(Style.error(f"Error clearing cache: {e}"), err=True)
        raise SystemExit(1)
    click.echo(Style.success("Schema cache cleared successfully"))


if __name__ == "__main__":
    cli()

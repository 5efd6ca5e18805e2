"""Main entry point for the validate_json_schema package."""

from validate_json_schema.cli.cli import cli
from validate_json_schema.env import load_env_files


def main() -> None:
    """Entry point for the validate-json-schema CLI."""
    load_env_files()
    cli()


if __name__ == "__main__":
    main()

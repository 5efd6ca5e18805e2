"""Command-line interface for validate-json-schema."""

from .cli import cli

__all__ = ["cli"]

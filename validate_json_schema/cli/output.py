"""Styled output formatting for the CLI."""

import logging

import click


class Style:
    """Terminal styling constants."""

    SUCCESS = click.style("✓", fg="green", bold=True)
    ERROR = click.style("✗", fg="red", bold=True)
    INFO = click.style("»", fg="blue", bold=True)

    @staticmethod
    def success(text: str) -> str:
        """Format a success message."""
        return f"{Style.SUCCESS} {text}"

    @staticmethod
    def error(text: str) -> str:
        """Format an error message."""
        return f"{Style.ERROR} {text}"

    @staticmethod
    def info(text: str) -> str:
        """Format an info message."""
        return f"{Style.INFO} {text}"


class ClickEchoHandler(logging.Handler):
    """Logging handler that writes records to stderr through ``click.echo``."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)

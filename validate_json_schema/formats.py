"""Classification of document formats and schema inputs.

These are cheap prefix/suffix checks, kept in one place so the engine and the
CLI's verbose report share the same rules.
"""

from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .constants import URL_PREFIXES


class DocumentFormat(Enum):
    """Serialization format of a document."""

    JSON = "JSON"
    YAML = "YAML"


class SchemaSource(Enum):
    """Where a schema input is loaded from."""

    LOCAL = "local"
    REMOTE = "remote"


_EXTENSION_FORMATS = {
    ".json": DocumentFormat.JSON,
    ".yaml": DocumentFormat.YAML,
    ".yml": DocumentFormat.YAML,
}


def detect_content_format(text: str) -> DocumentFormat:
    """Guess the format of ``text`` without parsing it.

    Text whose first non-whitespace character is ``{`` or ``[`` is JSON,
    everything else (including empty text) is YAML.
    """
    stripped = text.lstrip()
    if stripped.startswith(("{", "[")):
        return DocumentFormat.JSON
    return DocumentFormat.YAML


def format_from_extension(path: Union[str, Path]) -> Optional[DocumentFormat]:
    """Return the format implied by the file extension, or None if it implies none."""
    return _EXTENSION_FORMATS.get(Path(path).suffix.lower())


def resolve_document_format(path: Union[str, Path], text: str) -> DocumentFormat:
    """Extension first, then content sniffing."""
    return format_from_extension(path) or detect_content_format(text)


def is_url(schema_input: str) -> bool:
    """Check if a schema input is a remote URL (``http://`` or ``https://``)."""
    return schema_input.startswith(URL_PREFIXES)


def classify_schema_input(schema_input: str) -> SchemaSource:
    """Classify a schema input string as a local path or a remote URL."""
    return SchemaSource.REMOTE if is_url(schema_input) else SchemaSource.LOCAL

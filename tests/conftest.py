"""Shared fixtures for the validate_json_schema tests."""

from pathlib import Path
from typing import Generator, Optional
from unittest.mock import MagicMock

import pytest

from validate_json_schema.cache import SchemaCache, default_cache_dir
from validate_json_schema.constants import ENV_CACHE_DIR

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
SCHEMAS_DIR = TESTS_DIR / "schemas"

NAME_SCHEMA = '{"type": "object", "properties": {"name": {"type": "string"}}}'
REQUIRED_NAME_SCHEMA = """{
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer", "minimum": 0}
    },
    "required": ["name"]
}"""
SCHEMA_URL = "https://example.com/schemas/person.json"


def make_response(
    status_code: int = 200, text: str = NAME_SCHEMA, reason: Optional[str] = None
) -> MagicMock:
    """Build a stand-in for a ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.reason = reason or ("OK" if status_code < 400 else "Not Found")
    return response


@pytest.fixture(autouse=True)
def isolated_cache_base(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Point the default schema cache at a temporary directory for every test."""
    base = tmp_path / "user-cache"
    monkeypatch.setenv(ENV_CACHE_DIR, str(base))
    default_cache_dir.cache_clear()
    yield base
    default_cache_dir.cache_clear()


@pytest.fixture
def cache_dir(tmp_path: Path) -> Path:
    """Directory for an explicitly constructed schema cache."""
    return tmp_path / "schemas"


@pytest.fixture
def cache(cache_dir: Path) -> SchemaCache:
    """A schema cache rooted in a temporary directory."""
    return SchemaCache(cache_dir)


@pytest.fixture
def write_file(tmp_path: Path):
    """Write a text file under the temporary directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write

"""Resolution of schema inputs (file paths or URLs) to compiled validators."""

import logging
from pathlib import Path
from typing import Optional, Union

from .cache import SchemaCache
from .fetcher import SchemaFetcher
from .formats import is_url
from .parsing import read_text_file
from .validator import Validator

logger = logging.getLogger(__name__)


class ValidatorFactory:
    """Builds :class:`Validator` instances from schema text, files or URLs.

    The fetcher is only created when a URL is resolved, so the default cache
    directory is never looked up for local schemas.
    """

    def __init__(self, fetcher: Optional[SchemaFetcher] = None) -> None:
        self._fetcher = fetcher

    @classmethod
    def with_cache_dir(cls, cache_dir: Union[str, Path]) -> "ValidatorFactory":
        """Create a factory whose remote schemas are cached in ``cache_dir``."""
        return cls(SchemaFetcher(SchemaCache(cache_dir)))

    @property
    def fetcher(self) -> SchemaFetcher:
        if self._fetcher is None:
            self._fetcher = SchemaFetcher(SchemaCache.default())
        return self._fetcher

    def from_schema_text(self, schema_text: str) -> Validator:
        """Compile schema text."""
        return Validator.compile(schema_text)

    def from_file(self, schema_path: Union[str, Path]) -> Validator:
        """Read and compile a local schema file."""
        logger.debug("Loading local schema: %s", schema_path)
        return Validator.compile(read_text_file(schema_path))

    def from_url(self, schema_url: str) -> Validator:
        """Fetch (or load from cache) and compile a remote schema."""
        logger.debug("Loading remote schema: %s", schema_url)
        return Validator.compile(self.fetcher.fetch(schema_url))

    def from_input(self, schema_input: str) -> Validator:
        """Compile a schema given either an ``http(s)://`` URL or a file path."""
        if is_url(schema_input):
            return self.from_url(schema_input)
        return self.from_file(schema_input)

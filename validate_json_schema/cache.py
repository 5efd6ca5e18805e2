"""On-disk cache of remote schemas, keyed by the SHA-256 of the schema URL."""

import functools
import hashlib
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_cache_path

from .constants import CACHE_APP_NAME, CACHE_FILE_SUFFIX, CACHE_SUBDIR, ENV_CACHE_DIR
from .env import get_env_var
from .errors import CacheDirectoryError, FileReadError

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=None)
def default_cache_dir() -> Path:
    """Resolve the process-wide schema cache directory.

    Uses ``VALIDATE_JSON_SCHEMA_CACHE_DIR`` as the cache base when set, otherwise
    the platform's user cache directory. The result is computed once per
    process; ``default_cache_dir.cache_clear()`` forces a new lookup.

    Raises:
        CacheDirectoryError: If no cache directory can be determined
    """
    override = get_env_var(ENV_CACHE_DIR)
    if override:
        base = Path(override).expanduser()
    else:
        try:
            base = user_cache_path()
        except Exception as e:
            raise CacheDirectoryError(
                f"Could not determine cache directory: {e}"
            ) from e
        if not str(base):
            raise CacheDirectoryError("Could not determine cache directory")
    return base / CACHE_APP_NAME / CACHE_SUBDIR


class SchemaCache:
    """Content-addressed store of schema text.

    Entries never expire; a cached URL is served from disk until :meth:`clear`
    removes the whole directory.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    @classmethod
    def default(cls) -> "SchemaCache":
        """Create a cache rooted at :func:`default_cache_dir`."""
        return cls(default_cache_dir())

    @staticmethod
    def key_for(url: str) -> str:
        """Cache key for a URL: hex SHA-256 of its UTF-8 bytes plus ``.json``."""
        return hashlib.sha256(url.encode("utf-8")).hexdigest() + CACHE_FILE_SUFFIX

    def path_for(self, key: str) -> Path:
        """Location of the cache file for ``key``."""
        return self.directory / key

    def get(self, key: str) -> Optional[str]:
        """Return the cached schema text, or None when there is no entry."""
        path = self.path_for(key)
        if not path.is_file():
            logger.debug("Cache miss: %s", path)
            return None
        logger.debug("Cache hit: %s", path)
        try:
            with path.open("r", encoding="utf-8", newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(path, str(e)) from e

    def put(self, key: str, schema_text: str) -> Path:
        """Store ``schema_text`` verbatim under ``key``.

        The text is written to a temporary file in the cache directory and
        renamed into place, so a failed write never leaves a partial entry.

        Returns:
            Path of the cache file
        """
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheDirectoryError(
                f"Failed to create cache directory: {e}", self.directory
            ) from e

        path = self.path_for(key)
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=self.directory,
                prefix=f".{key}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(schema_text)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise CacheDirectoryError(
                f"Failed to write cache entry: {e}", path
            ) from e

        logger.debug("Cached schema: %s", path)
        return path

    def clear(self) -> None:
        """Remove the entire cache directory. Succeeds if it does not exist."""
        if not self.directory.exists():
            logger.debug("Cache directory already absent: %s", self.directory)
            return
        try:
            shutil.rmtree(self.directory)
        except FileNotFoundError:
            pass
        except OSError as e:
            raise CacheDirectoryError(
                f"Failed to remove cache directory: {e}", self.directory
            ) from e
        logger.debug("Cleared schema cache: %s", self.directory)

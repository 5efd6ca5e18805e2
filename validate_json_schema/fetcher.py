"""Retrieval of remote schemas over HTTP, backed by :class:`SchemaCache`."""

import logging
import re
from urllib.parse import urlsplit

import requests
from requests.exceptions import RequestException

from .cache import SchemaCache
from .constants import HTTP_TIMEOUT_SECONDS, USER_AGENT
from .errors import HttpRequestError, InvalidUrlError
from .parsing import parse_json

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}


def validate_url(url: str) -> None:
    """Check that ``url`` is a well-formed absolute URL.

    Raises:
        InvalidUrlError: If the URL is malformed
    """
    if not url:
        raise InvalidUrlError(url, "empty URL")
    if any(ch.isspace() for ch in url):
        raise InvalidUrlError(url, "URL contains whitespace")

    try:
        parts = urlsplit(url)
        # Accessing the port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e

    if not parts.scheme or not _SCHEME_RE.match(parts.scheme):
        raise InvalidUrlError(url, "relative URL without a base")
    if parts.scheme.lower() in _HOST_SCHEMES and not parts.hostname:
        raise InvalidUrlError(url, "empty host")


class SchemaFetcher:
    """Fetches schema text by URL, serving repeat requests from the cache."""

    def __init__(
        self,
        cache: SchemaCache,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        user_agent: str = USER_AGENT,
    ) -> None:
        self.cache = cache
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> str:
        """Return the schema text for ``url``.

        A cached entry for the exact URL string is returned without network
        access. Otherwise the schema is downloaded once (no retries), checked
        to be JSON and stored in the cache.

        Raises:
            InvalidUrlError: If the URL is malformed
            HttpRequestError: On network failure or a non-2xx response
            JsonParseError: If the response body is not JSON
        """
        validate_url(url)

        key = self.cache.key_for(url)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Using cached schema for %s", url)
            return cached

        schema_text = self._download(url)

        # Only valid JSON is ever cached
        parse_json(schema_text)

        self.cache.put(key, schema_text)
        return schema_text

    def _download(self, url: str) -> str:
        logger.debug("Fetching schema from %s (timeout=%ss)", url, self.timeout)
        try:
            response = requests.get(
                url,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except RequestException as e:
            raise HttpRequestError(url, reason=str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.debug("Fetch of %s returned HTTP %s", url, response.status_code)
            raise HttpRequestError(
                url, status_code=response.status_code, reason=response.reason
            )

        return response.text

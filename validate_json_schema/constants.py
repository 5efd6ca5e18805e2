"""Constants for validate-json-schema."""

from validate_json_schema import __version__

# HTTP client
USER_AGENT = f"validate-json-schema/{__version__}"
HTTP_TIMEOUT_SECONDS = 30

# Schema cache layout: <cache base>/validate-json-schema/schemas/<sha256>.json
CACHE_APP_NAME = "validate-json-schema"
CACHE_SUBDIR = "schemas"
CACHE_FILE_SUFFIX = ".json"

# Schema inputs with these prefixes are fetched over HTTP
URL_PREFIXES = ("http://", "https://")

# Environment variables
ENV_CACHE_DIR = "VALIDATE_JSON_SCHEMA_CACHE_DIR"
ENV_LOG_LEVEL = "VALIDATE_JSON_SCHEMA_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"

# Location reported for violations at the document root
ROOT_LOCATION = "root"

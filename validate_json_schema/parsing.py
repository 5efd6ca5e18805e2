"""Parsing of YAML and JSON text into plain Python values.

Both parsers produce the same value model (None, bool, int, float, str, list and
dict with str keys), so a YAML document and its JSON equivalent validate
identically.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Union

import yaml
from yaml.constructor import ConstructorError, SafeConstructor

from .errors import FileReadError, JsonParseError, YamlParseError
from .formats import DocumentFormat

logger = logging.getLogger(__name__)

_BOOL_TAG = "tag:yaml.org,2002:bool"
_INT_TAG = "tag:yaml.org,2002:int"
_FLOAT_TAG = "tag:yaml.org,2002:float"
_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"
_VALUE_TAG = "tag:yaml.org,2002:value"
_SET_TAG = "tag:yaml.org,2002:set"
_MERGE_TAG = "tag:yaml.org,2002:merge"
_REPLACED_TAGS = (_BOOL_TAG, _INT_TAG, _FLOAT_TAG, _TIMESTAMP_TAG, _VALUE_TAG)


def _core_schema_resolvers():
    # SafeLoader implements YAML 1.1; drop the resolvers that turn `yes`/`on`
    # into booleans, bare dates into datetime objects and `22:22` or `1_000`
    # into numbers. Core-schema replacements are registered below.
    resolvers = {}
    for first_char, entries in yaml.SafeLoader.yaml_implicit_resolvers.items():
        kept = [
            (tag, regexp)
            for tag, regexp in entries
            if tag not in _REPLACED_TAGS
        ]
        if kept:
            resolvers[first_char] = kept
    return resolvers


def _construct_core_int(loader, node):
    value = loader.construct_scalar(node)
    try:
        if value.startswith("0o"):
            return int(value[2:], 8)
        if value.startswith("0x"):
            return int(value[2:], 16)
        return int(value)
    except ValueError:
        raise ConstructorError(
            None, None, f"invalid integer {value!r}", node.start_mark
        ) from None


def _construct_core_float(loader, node):
    value = loader.construct_scalar(node)
    special = value.lstrip("+-").lower()
    sign = -1.0 if value.startswith("-") else 1.0
    if special == ".inf":
        return sign * float("inf")
    if special == ".nan":
        return float("nan")
    try:
        return float(value)
    except ValueError:
        raise ConstructorError(
            None, None, f"invalid float {value!r}", node.start_mark
        ) from None


def _canonical_key(key: Any, key_node: yaml.Node, node: yaml.Node) -> str:
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    raise ConstructorError(
        "while constructing a mapping",
        node.start_mark,
        "found unsupported non-scalar key",
        key_node.start_mark,
    )


class CanonicalLoader(yaml.SafeLoader):
    """SafeLoader that only produces JSON-compatible values."""

    yaml_implicit_resolvers = _core_schema_resolvers()

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            return super().construct_mapping(node, deep=deep)

        seen = set()
        for key_node, _ in node.value:
            if key_node.tag == _MERGE_TAG:
                continue
            key = _canonical_key(
                self.construct_object(key_node, deep=True), key_node, node
            )
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    f"found duplicate key {key!r}",
                    key_node.start_mark,
                )
            seen.add(key)

        # Merge keys are expanded first so explicit keys override merged ones
        self.flatten_mapping(node)
        mapping = {}
        for key_node, value_node in node.value:
            key = _canonical_key(
                self.construct_object(key_node, deep=True), key_node, node
            )
            mapping[key] = self.construct_object(value_node, deep=deep)
        return mapping


CanonicalLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)
CanonicalLoader.add_implicit_resolver(
    _INT_TAG,
    re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$"),
    list("-+0123456789"),
)
CanonicalLoader.add_implicit_resolver(
    _FLOAT_TAG,
    re.compile(
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)"
        r"|\.(?:nan|NaN|NAN))$"
    ),
    list("-+.0123456789"),
)
CanonicalLoader.add_constructor(_INT_TAG, _construct_core_int)
CanonicalLoader.add_constructor(_FLOAT_TAG, _construct_core_float)
CanonicalLoader.add_constructor(_TIMESTAMP_TAG, SafeConstructor.construct_yaml_str)
CanonicalLoader.add_constructor(_SET_TAG, SafeConstructor.construct_yaml_map)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_json(text: str) -> Any:
    """Parse JSON text.

    Raises:
        JsonParseError: If the text is not valid JSON
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise JsonParseError(e.msg, e.lineno, e.colno) from e
    except ValueError as e:
        raise JsonParseError(str(e)) from e


def parse_yaml(text: str) -> Any:
    """Parse a single YAML document. Empty text parses to None.

    Raises:
        YamlParseError: If the text is not valid YAML or holds a value with
            no JSON equivalent
    """
    try:
        return yaml.load(text, Loader=CanonicalLoader)
    except yaml.MarkedYAMLError as e:
        mark = e.problem_mark
        reason = " ".join(part for part in (e.context, e.problem) if part) or str(e)
        if mark is None:
            raise YamlParseError(reason) from e
        raise YamlParseError(reason, mark.line + 1, mark.column + 1) from e
    except yaml.YAMLError as e:
        raise YamlParseError(str(e)) from e


def parse_document(text: str, document_format: DocumentFormat) -> Any:
    """Parse text in the given format."""
    logger.debug("Parsing document as %s", document_format.value)
    if document_format is DocumentFormat.JSON:
        return parse_json(text)
    return parse_yaml(text)


def read_text_file(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileReadError: If the file is missing, unreadable or not UTF-8
    """
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise FileReadError(file_path, reason) from e

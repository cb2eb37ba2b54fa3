"""Permissive readers and omission-aware writers for JSON documents."""

import json
import logging
from enum import Enum
from typing import Any, TypeVar

from pydantic import JsonValue

from webpub.errors import ParseError

log = logging.getLogger(__name__)

JSONDict = dict[str, JsonValue]

E = TypeVar("E", bound=Enum)


def as_json_dict(document: Any, type_name: str) -> JSONDict | None:
    """Return a shallow copy of a JSON object, or None if it is absent.

    Raises:
        ParseError: If the document is present but is not an object
    """
    if document is None:
        return None
    if not isinstance(document, dict):
        raise ParseError(
            type_name, f"expected an object, got {type(document).__name__}"
        )
    return dict(document)


def optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def optional_bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def optional_float(value: Any) -> float | None:
    # bool is an int subclass, JSON booleans are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return float(value)
    except OverflowError:
        return None


def optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def string_list(value: Any) -> list[str]:
    """Read a list of strings, all or nothing."""
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return list(value)
    return []


def parse_raw(enum_type: type[E], value: Any) -> E | None:
    """Match a raw JSON string against an enumeration's values."""
    if not isinstance(value, str):
        return None
    try:
        return enum_type(value)
    except ValueError:
        return None


def make_json(fields: dict[str, Any], additional: JSONDict | None = None) -> JSONDict:
    """Build a JSON object, omitting absent values and empty collections.

    Extension fields in `additional` are copied verbatim first, known fields
    are then written over them.
    """
    result: JSONDict = dict(additional) if additional else {}
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, (list, dict)) and not value:
            continue
        if isinstance(value, Enum):
            value = value.value
        result[key] = value
    return result


def decode_json_string(text: str, type_name: str) -> Any:
    """Decode a JSON string.

    Raises:
        ParseError: If the string is not valid JSON
    """
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise ParseError(type_name, str(e)) from e


def encode_json_string(document: JsonValue, indent: int | None = None) -> str | None:
    """Serialize a JSON document, None if it cannot be represented."""
    try:
        return json.dumps(document, ensure_ascii=False, allow_nan=False, indent=indent)
    except (TypeError, ValueError) as e:
        log.error("Failed to serialize JSON document: %s", e)
        return None


def json_equal(a: JsonValue, b: JsonValue) -> bool:
    """Compare JSON values, telling booleans apart from numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    return a == b

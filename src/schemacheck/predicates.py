"""Leaf predicates used by the validator: type, format and deep equality.

Unknown type names and unknown format names are accepted. Both dispatchers
end in an explicit default arm that returns True so that schemas written for
a richer dialect still validate the keywords this package understands.
"""

from __future__ import annotations

from datetime import date, datetime
from email.utils import parsedate_to_datetime
import math
import re
from typing import Any, Mapping
from urllib.parse import urlsplit

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Schemes whose URIs need an authority component to be usable.
_HOST_SCHEMES = frozenset(("http", "https", "ftp", "ws", "wss"))


def is_number(value: Any) -> bool:
    """True for ints and floats, never for bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_container(value: Any) -> bool:
    return isinstance(value, (Mapping, list))


def type_name_of(value: Any) -> str:
    """Name used in type mismatch messages; ``None`` reports as ``object``."""
    if value is None:
        return "object"
    if isinstance(value, list):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def matches_type(value: Any, type_name: str) -> bool:
    """Check ``value`` against a schema ``type`` keyword."""
    if value is None:
        return type_name == "null"

    if type_name == "string":
        return isinstance(value, str)
    if type_name == "number":
        return is_number(value) and not (isinstance(value, float) and math.isnan(value))
    if type_name == "integer":
        if isinstance(value, float):
            return value.is_integer()
        return is_number(value)
    if type_name == "boolean":
        return isinstance(value, bool)
    if type_name == "array":
        return isinstance(value, list)
    if type_name == "object":
        return isinstance(value, Mapping)
    if type_name == "null":
        return False
    return True


def _is_date_time(value: str) -> bool:
    """Lenient date-time parse: ISO 8601 (``Z`` allowed) or RFC 2822."""
    text = value.strip()
    if not text:
        return False
    try:
        datetime.fromisoformat(text.replace("Z", "+00:00").replace("z", "+00:00"))
        return True
    except ValueError:
        pass
    try:
        parsedate_to_datetime(text)
        return True
    except (TypeError, ValueError, IndexError):
        return False


def _is_date(value: str) -> bool:
    if not DATE_PATTERN.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
        return True
    except ValueError:
        return False


def _is_uri(value: str) -> bool:
    if not value or value != value.strip():
        return False
    try:
        parts = urlsplit(value)
        # Accessing port validates the authority (bad ports raise ValueError).
        parts.port
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_PATTERN.match(parts.scheme):
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return bool(parts.netloc or parts.path or parts.query or parts.fragment)


def matches_format(value: Any, format_name: str) -> bool:
    """Check a string against a schema ``format`` keyword."""
    if not isinstance(value, str):
        return False

    if format_name == "email":
        return EMAIL_PATTERN.fullmatch(value) is not None
    if format_name == "date-time":
        return _is_date_time(value)
    if format_name == "date":
        return _is_date(value)
    if format_name == "uri":
        return _is_uri(value)
    return True


def _own_keys(value: Mapping[str, Any] | list[Any]) -> list[str]:
    if isinstance(value, list):
        return [str(index) for index in range(len(value))]
    return [str(key) for key in value.keys()]


def _value_at(value: Mapping[str, Any] | list[Any], key: str) -> Any:
    if isinstance(value, list):
        return value[int(key)]
    if key in value:
        return value[key]
    # Non-string keys are compared by their string form.
    for raw_key, item in value.items():
        if str(raw_key) == key:
            return item
    raise KeyError(key)


def _primitive_equal(a: Any, b: Any) -> bool:
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if is_number(a) and is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality by own key set, used for enum membership.

    Lists are treated as objects keyed by their string indices, so ``[1, 2]``
    equals ``{"0": 1, "1": 2}``. Key order never matters.
    """
    if a is b:
        return True

    if not is_container(a) or not is_container(b):
        return _primitive_equal(a, b)

    keys_a = _own_keys(a)
    keys_b = _own_keys(b)
    if len(keys_a) != len(keys_b):
        return False

    key_set_b = set(keys_b)
    for key in keys_a:
        if key not in key_set_b:
            return False
        if not deep_equal(_value_at(a, key), _value_at(b, key)):
            return False
    return True

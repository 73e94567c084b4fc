"""
Common field helpers
Date coercion for incoming payloads and JSON arrays stored in text columns
"""
from typing import Any, Dict, List
from datetime import datetime, timezone
import json

from dateutil import parser as date_parser

# Payload keys that carry dates, regardless of resource
DATE_FIELDS = frozenset({
    'startDate',
    'endDate',
    'issueDate',
    'published_at',
    'date',
    'createdAt',
    'updatedAt',
    'created_at',
    'updated_at',
    'maintenance_end_time',
})

# Missing date parts are filled from here, not from the current date
DATE_DEFAULT = datetime(1970, 1, 1)


def utc_now() -> datetime:
    """Naive UTC timestamp; columns are TIMESTAMP WITHOUT TIME ZONE"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_date(value: str) -> datetime:
    """
    Parse a date string into a naive UTC datetime.

    Raises:
        ValueError: if the string is not a recognizable date
    """
    try:
        dt = date_parser.parse(value, default=DATE_DEFAULT)
    except OverflowError as e:
        raise ValueError(str(e))

    # Convert timezone-aware datetime to timezone-naive UTC
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc).replace(tzinfo=None)
    return dt


def coerce_date_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of the payload with date-like fields converted.

    - non-empty string that parses -> datetime
    - non-empty string that doesn't parse -> left unchanged
    - empty string -> None
    Other value types are not touched.
    """
    processed = dict(payload)
    for key, value in processed.items():
        if key not in DATE_FIELDS:
            continue
        if isinstance(value, str) and value:
            try:
                processed[key] = parse_date(value)
            except ValueError:
                pass
        elif value == '':
            processed[key] = None
    return processed


def parse_json_array(value: Any) -> List[Any]:
    """
    Read a JSON-array-in-text value, tolerating legacy rows.

    Older rows may hold a double-encoded array ('"[\\"a\\"]"'), a non-array
    JSON value, or malformed JSON. Anything that doesn't end up as a list
    degrades to an empty list.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value

    decoded = value
    # At most two rounds: plain and double-encoded
    for _ in range(2):
        if not isinstance(decoded, (str, bytes)):
            break
        try:
            decoded = json.loads(decoded)
        except (TypeError, ValueError):
            return []

    return decoded if isinstance(decoded, list) else []


def normalize_json_array(value: Any) -> str:
    """
    Serialize an incoming value for a JSON-array-in-text column.

    Accepts a list, a JSON array string (double-encoded strings are decoded)
    or None (stored as "[]").

    Raises:
        ValueError: for anything that isn't a JSON array
    """
    if value is None:
        return "[]"
    if isinstance(value, list):
        return json.dumps(value)
    if isinstance(value, str):
        if not value.strip():
            return "[]"
        decoded: Any = value
        for _ in range(2):
            if not isinstance(decoded, str):
                break
            try:
                decoded = json.loads(decoded)
            except ValueError:
                raise ValueError(f"Invalid JSON array: {value[:50]}")
        if isinstance(decoded, list):
            return json.dumps(decoded)
    raise ValueError(f"Expected a JSON array, got {type(value).__name__}")

"""
Write payload preparation for generic resources
"""
import logging
from datetime import datetime
from typing import Any, Dict

from portfolio_api.apps.resources.registry import ResourceSpec
from portfolio_api.common.fields import coerce_date_fields, normalize_json_array

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


class PayloadError(ValueError):
    """A payload value can't be stored in its column."""


def _python_type(column) -> Any:
    try:
        return column.type.python_type
    except NotImplementedError:
        return None


def _coerce_value(column, value: Any) -> Any:
    if value is None:
        return None

    python_type = _python_type(column)
    if python_type is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str) and value.strip().lower() in _TRUE_STRINGS | _FALSE_STRINGS:
            return value.strip().lower() in _TRUE_STRINGS
        raise PayloadError(f"Invalid boolean for '{column.name}': {value!r}")

    if python_type is int:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            if value.strip() == "":
                return None
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise PayloadError(f"Invalid integer for '{column.name}': {value!r}")

    if python_type is datetime:
        if isinstance(value, datetime):
            return value
        raise PayloadError(f"Invalid date for '{column.name}': {value!r}")

    if python_type is str:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float, bool)):
            return str(value)
        raise PayloadError(f"Invalid text for '{column.name}': {value!r}")

    return value


def prepare_payload(spec: ResourceSpec, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build the column values for an INSERT/UPDATE from a request body.

    Dates are coerced, unknown keys dropped, `id` never written, values
    converted to their column type and JSON-array-in-text columns normalized.

    Raises:
        PayloadError: when a value can't be stored in its column
    """
    processed = coerce_date_fields(body)
    columns = spec.model.__table__.columns
    values: Dict[str, Any] = {}
    dropped = []

    for key, value in processed.items():
        if key == "id":
            continue
        if key not in columns:
            dropped.append(key)
            continue
        if key in spec.json_array_fields:
            try:
                values[key] = normalize_json_array(value)
            except ValueError as e:
                raise PayloadError(f"Invalid value for '{key}': {e}")
            continue
        values[key] = _coerce_value(columns[key], value)

    if dropped:
        logger.debug(f"Ignoring unknown fields for {spec.name}: {dropped}")

    return values

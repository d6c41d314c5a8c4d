"""Reading and writing durations inside JSON documents.

A duration field holds either the canonical text (``"1h30m"``) or a
number of milliseconds. ``null`` means the field is unset.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from perses_duration.duration import Duration, format_duration, from_millis, parse
from perses_duration.errors import InvalidDuration
from perses_duration.types import DocumentValue, DurationText

logger = logging.getLogger(__name__)


def from_document_value(value: DocumentValue | Duration) -> Duration | None:
    """Decode a duration field value.

    Strings are parsed, numbers are taken as milliseconds and ``None``
    yields ``None``.

    Raises:
        InvalidDuration: If the value is not a valid duration.
    """
    if value is None:
        return None
    if isinstance(value, Duration):
        return value
    try:
        if isinstance(value, str):
            return parse(value)
        if isinstance(value, bool):
            raise InvalidDuration(f"not a duration: {value!r}", value)
        if isinstance(value, int):
            return from_millis(value)
        if isinstance(value, float):
            if not value.is_integer():
                raise InvalidDuration(
                    f"duration must be a whole number of milliseconds, got {value!r}",
                    value,
                )
            return from_millis(int(value))
        raise InvalidDuration(f"not a duration: {value!r}", value)
    except InvalidDuration as e:
        logger.debug("Rejected duration field value %r: %s", value, e)
        raise


def to_document_value(duration: Duration | None) -> DurationText | None:
    """Encode a duration for a document field; ``None`` stays unset."""
    if duration is None:
        return None
    return format_duration(duration)


def encode_json_default(obj: Any) -> Any:
    """``default`` hook for ``json.dumps`` that writes durations as text."""
    if isinstance(obj, Duration):
        return format_duration(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps(document: Any, **kwargs: Any) -> str:
    """Serialize a document to JSON, encoding any Duration values as text."""
    kwargs.setdefault("default", encode_json_default)
    return json.dumps(document, **kwargs)


def decode_duration_fields(
    document: Mapping[str, Any], fields: Iterable[str]
) -> dict[str, Any]:
    """Return a copy of a decoded JSON object with the named fields as Durations.

    Missing fields are left missing and ``null`` fields stay ``None``.

    Raises:
        InvalidDuration: If a named field holds an invalid duration. The
            message names the field.
    """
    result = dict(document)
    for field in fields:
        if field not in result:
            continue
        try:
            result[field] = from_document_value(result[field])
        except InvalidDuration as e:
            raise InvalidDuration(f"{field}: {e}", e.value) from e
    return result

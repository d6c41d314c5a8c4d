"""perses-duration - Duration values for monitoring configuration documents."""

# Document embedding
from perses_duration.document import (
    decode_duration_fields,
    dumps,
    encode_json_default,
    from_document_value,
    to_document_value,
)

# Duration codec
from perses_duration.duration import (
    Duration,
    format_duration,
    from_millis,
    parse,
    parse_duration,
)
from perses_duration.errors import InvalidDuration

# Core types
from perses_duration.types import DocumentValue, DurationLike, DurationText
from perses_duration.units import (
    DAY,
    HOUR,
    MAX_MILLIS,
    MILLISECOND,
    MINUTE,
    SECOND,
    UNITS,
    WEEK,
    YEAR,
    Unit,
    lookup_unit,
)

__version__ = "0.1.0"

__all__ = [
    "DAY",
    "HOUR",
    "MAX_MILLIS",
    "MILLISECOND",
    "MINUTE",
    "SECOND",
    "UNITS",
    "WEEK",
    "YEAR",
    "DocumentValue",
    "Duration",
    "DurationLike",
    "DurationText",
    "InvalidDuration",
    "Unit",
    "decode_duration_fields",
    "dumps",
    "encode_json_default",
    "format_duration",
    "from_document_value",
    "from_millis",
    "lookup_unit",
    "parse",
    "parse_duration",
    "to_document_value",
]

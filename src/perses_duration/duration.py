"""Duration value type and its text codec.

A duration is written as one or more ``<digits><unit>`` groups with the
units in decreasing size, e.g. ``3d5h30m10s``. Valid units are ``y``
(365 days), ``w`` (7 days), ``d`` (24 hours), ``h``, ``m``, ``s`` and
``ms``. The literal ``"0"`` is also accepted.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from perses_duration.errors import InvalidDuration
from perses_duration.types import DurationLike, DurationText
from perses_duration.units import MAX_MILLIS, UNITS, lookup_unit

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue
    from pydantic_core import CoreSchema

# One "<digits><unit>" group; either part may be empty, both only at the end
_GROUP_PATTERN = re.compile(r"([0-9]*)([^0-9]*)")
_MAX_DIGITS = len(str(MAX_MILLIS))


@dataclass(frozen=True, slots=True, order=True, repr=False)
class Duration:
    """A non-negative interval, stored as whole milliseconds."""

    millis: int

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise InvalidDuration(
                f"duration must be an integer number of milliseconds, "
                f"got {self.millis!r}",
                self.millis,
            )
        if not 0 <= self.millis <= MAX_MILLIS:
            raise InvalidDuration("duration out of range", self.millis)

    @classmethod
    def parse(cls, text: str | None) -> Duration:
        """Parse a duration string such as ``"1h30m"``."""
        return parse(text)

    @classmethod
    def from_millis(cls, millis: int) -> Duration:
        """Wrap a count of milliseconds."""
        return cls(millis)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Convert a timedelta, dropping any sub-millisecond part."""
        return cls(delta // timedelta(milliseconds=1))

    def format(self) -> DurationText:
        """Return the canonical text form."""
        return format_duration(self)

    def to_timedelta(self) -> timedelta:
        """Return the equivalent timedelta.

        Raises OverflowError for durations longer than ``timedelta.max``.
        """
        return timedelta(milliseconds=self.millis)

    def __int__(self) -> int:
        return self.millis

    def __str__(self) -> str:
        return format_duration(self)

    def __repr__(self) -> str:
        return f"Duration({format_duration(self)!r})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Let pydantic models declare ``Duration`` fields.

        Accepts the same values as a JSON document field (text or
        milliseconds) and serializes to the canonical text.
        """
        from pydantic_core import core_schema

        return core_schema.no_info_plain_validator_function(
            _validate_field,
            serialization=core_schema.plain_serializer_function_ser_schema(
                format_duration
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the accepted field values: text or milliseconds."""
        return {
            "anyOf": [
                {"type": "string"},
                {"type": "integer", "minimum": 0, "maximum": MAX_MILLIS},
            ]
        }


def _validate_field(value: Any) -> Duration:
    from perses_duration.document import from_document_value

    duration = from_document_value(value)
    if duration is None:
        raise InvalidDuration("empty duration string", value)
    return duration


def _not_valid(text: str) -> InvalidDuration:
    return InvalidDuration(f'not a valid duration string: "{text}"', text)


def parse(text: str | None) -> Duration:
    """Parse a duration string into a Duration.

    Units must appear at most once and from largest to smallest; any of
    them may be skipped. Values beyond the 64-bit millisecond range are
    rejected rather than wrapped.

    Raises:
        InvalidDuration: If the text is empty, malformed, uses an unknown
            unit, or is out of range.
    """
    if text is None or text == "":
        raise InvalidDuration("empty duration string", text)
    if not isinstance(text, str):
        raise InvalidDuration(f"not a valid duration string: {text!r}", text)
    if text == "0":
        return Duration(0)

    total = 0
    last_rank = 0
    for match in _GROUP_PATTERN.finditer(text):
        digits, suffix = match.groups()
        if not digits and not suffix:
            break  # end of input
        if not digits or not suffix:
            raise _not_valid(text)

        unit = lookup_unit(suffix)
        if unit is None:
            raise InvalidDuration(
                f'unknown unit "{suffix}" in duration "{text}"', text
            )
        if unit.rank <= last_rank:
            raise _not_valid(text)
        last_rank = unit.rank

        # Skip int() on runs that cannot fit; huge runs would also trip
        # the interpreter's int/str conversion limit.
        if len(digits.lstrip("0")) > _MAX_DIGITS:
            raise InvalidDuration("duration out of range", text)
        add = int(digits) * unit.millis
        if add > MAX_MILLIS:
            raise InvalidDuration("duration out of range", text)
        total += add
        if total > MAX_MILLIS:
            raise InvalidDuration("duration out of range", text)

    return Duration(total)


def format_duration(duration: Duration) -> DurationText:
    """Return the canonical text form of a duration.

    Zero is written ``"0s"``. Years and weeks are only used when the
    remaining value is an exact multiple of them, so one week and three
    days comes out as ``"10d"``.
    """
    remaining = duration.millis
    if remaining == 0:
        return DurationText("0s")

    parts: list[str] = []
    for unit in UNITS:
        if unit.exact_only and remaining % unit.millis:
            continue
        count, remaining = divmod(remaining, unit.millis)
        if count:
            parts.append(f"{count}{unit.suffix}")
    return DurationText("".join(parts))


def from_millis(millis: int) -> Duration:
    """Wrap a count of milliseconds.

    Raises:
        InvalidDuration: If ``millis`` is not an integer or is outside
            ``0..MAX_MILLIS``.
    """
    return Duration(millis)


def parse_duration(duration: DurationLike) -> int:
    """Return the milliseconds for a duration string or count.

    Integers are returned unchanged once checked against the duration range.

    Raises:
        InvalidDuration: If the text is not a valid duration or the count
            is negative or above ``MAX_MILLIS``.
    """
    if isinstance(duration, int) and not isinstance(duration, bool):
        return from_millis(duration).millis
    return parse(duration).millis

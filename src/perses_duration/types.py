"""Type aliases shared across perses_duration."""

from typing import TYPE_CHECKING, NewType

# Branded text type - compile-time enforcement only
if TYPE_CHECKING:
    DurationText = NewType("DurationText", str)
else:
    DurationText = str

# Text ("1h30m") or milliseconds
DurationLike = str | int

# What a JSON document may hold in a duration field
DocumentValue = str | int | float | None

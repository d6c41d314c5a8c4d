"""Duration units and their millisecond multipliers."""

from dataclasses import dataclass
from types import MappingProxyType

MILLISECOND = 1
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = 365 * DAY  # a year is always 365 days

# Largest millisecond count a duration may hold (signed 64-bit range)
MAX_MILLIS = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Unit:
    """A duration unit suffix.

    ``rank`` orders units from the largest (``y`` = 1) to the smallest
    (``ms`` = 7). Units in a duration string must appear with strictly
    increasing rank. Units marked ``exact_only`` are only used when
    formatting a value that is a whole multiple of them.
    """

    suffix: str
    rank: int
    millis: int
    exact_only: bool = False


# Largest first
UNITS: tuple[Unit, ...] = (
    Unit("y", 1, YEAR, exact_only=True),
    Unit("w", 2, WEEK, exact_only=True),
    Unit("d", 3, DAY),
    Unit("h", 4, HOUR),
    Unit("m", 5, MINUTE),
    Unit("s", 6, SECOND),
    Unit("ms", 7, MILLISECOND),
)

UNITS_BY_SUFFIX: MappingProxyType[str, Unit] = MappingProxyType(
    {unit.suffix: unit for unit in UNITS}
)


def lookup_unit(suffix: str) -> Unit | None:
    """Return the unit for a suffix, or None if it is not recognized."""
    return UNITS_BY_SUFFIX.get(suffix)

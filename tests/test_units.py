"""Tests for the unit table."""

import pytest

from perses_duration import DAY, MAX_MILLIS, UNITS, WEEK, YEAR, lookup_unit


class TestUnits:
    """Tests for unit constants and lookup."""

    def test_constants(self) -> None:
        """Test base unit sizes."""
        assert DAY == 86_400_000
        assert WEEK == 7 * DAY
        assert YEAR == 365 * DAY
        assert MAX_MILLIS == 9_223_372_036_854_775_807

    def test_table_is_largest_first(self) -> None:
        """Test that units are listed by decreasing size and increasing rank."""
        assert [unit.suffix for unit in UNITS] == ["y", "w", "d", "h", "m", "s", "ms"]
        assert [unit.rank for unit in UNITS] == [1, 2, 3, 4, 5, 6, 7]
        sizes = [unit.millis for unit in UNITS]
        assert sizes == sorted(sizes, reverse=True)

    def test_exact_only_units(self) -> None:
        """Test that only years and weeks need exact multiples."""
        assert [unit.suffix for unit in UNITS if unit.exact_only] == ["y", "w"]

    def test_lookup(self) -> None:
        """Test looking up units by suffix."""
        unit = lookup_unit("ms")
        assert unit is not None
        assert unit.millis == 1
        assert unit.rank == 7

    def test_lookup_unknown(self) -> None:
        """Test that unknown suffixes return None."""
        assert lookup_unit("x") is None
        assert lookup_unit("M") is None
        assert lookup_unit("") is None

    def test_table_is_read_only(self) -> None:
        """Test that the unit table cannot be modified."""
        from perses_duration.units import UNITS_BY_SUFFIX

        with pytest.raises(TypeError):
            UNITS_BY_SUFFIX["x"] = UNITS[0]  # type: ignore[index]

        with pytest.raises(AttributeError):
            UNITS[0].millis = 5  # type: ignore[misc]

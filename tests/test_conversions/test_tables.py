"""Tests for the built-in conversion tables."""
from __future__ import annotations

import pytest

from unitconv.conversions import CATEGORY_TABLES, INVERSE_PAIRS, ConversionRegistry
from unitconv.core.types import Category, ConversionName

TOLERANCE = 1e-9


class TestTables:
    def test_every_name_in_exactly_one_table(self):
        names = [name for table in CATEGORY_TABLES.values() for name, _ in table]
        assert len(names) == len(set(names)) == len(ConversionName)

    def test_category_order(self):
        assert list(CATEGORY_TABLES) == [
            Category.TEMPERATURE,
            Category.DISTANCE,
            Category.WEIGHT,
            Category.VOLUME,
        ]

    def test_inverse_pairs_cover_all_names(self):
        covered = {name for pair in INVERSE_PAIRS for name in pair}
        assert covered == set(ConversionName)

    def test_inverse_pairs_stay_in_category(self, registry: ConversionRegistry):
        for forward, inverse in INVERSE_PAIRS:
            assert registry.get(forward).category is registry.get(inverse).category


class TestRoundTrip:
    @pytest.mark.parametrize(
        "forward,inverse", INVERSE_PAIRS, ids=[f.value for f, _ in INVERSE_PAIRS]
    )
    def test_inverse_restores_value(self, registry: ConversionRegistry, forward, inverse):
        for value in (0.0, 0.5, 1.0, 37.0, 1234.5):
            # Entries are called directly to stay clear of clamping and validation
            back = registry.get(inverse)(registry.get(forward)(value))
            assert back == pytest.approx(value, rel=TOLERANCE, abs=TOLERANCE)

    def test_round_trip_through_convert(self, registry: ConversionRegistry):
        fahrenheit = registry.convert("CelsiusToFahrenheit", 21.5)
        assert registry.convert("FahrenheitToCelsius", fahrenheit) == pytest.approx(21.5)

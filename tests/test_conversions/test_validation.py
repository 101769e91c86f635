"""Tests for keyword-based category detection, validation and clamping."""
import pytest

from unitconv.conversions.validation import (
    clamp,
    detect_categories,
    source_unit,
    to_celsius_equivalent,
    validate,
)
from unitconv.core.errors import BelowAbsoluteZeroError, NegativeValueError
from unitconv.core.types import Category


class TestDetectCategories:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("CelsiusToKelvin", (Category.TEMPERATURE,)),
            ("KilometersToMiles", (Category.DISTANCE,)),
            ("KilogramsToPounds", (Category.WEIGHT,)),
            ("LitersToGallons", (Category.VOLUME,)),
            ("MillilitersToFluidOunces", (Category.WEIGHT, Category.VOLUME)),
            ("FluidOuncesToMilliliters", (Category.WEIGHT, Category.VOLUME)),
            ("InvalidType", ()),
            ("", ()),
        ],
    )
    def test_detect(self, name, expected):
        assert detect_categories(name) == expected

    def test_case_sensitive(self):
        # "Kilometers" holds "meters", not "Meters"
        assert detect_categories("kilometers") == ()
        assert detect_categories("Kilometers") == (Category.DISTANCE,)

    def test_mixed_name_matches_several(self):
        assert detect_categories("CelsiusToFeet") == (Category.TEMPERATURE, Category.DISTANCE)


class TestSourceUnit:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("CelsiusToKelvin", "Celsius"),
            ("FahrenheitToCelsius", "Fahrenheit"),
            ("KelvinToCelsius", "Kelvin"),
            ("InvalidType", "InvalidType"),
        ],
    )
    def test_source_unit(self, name, expected):
        assert source_unit(name) == expected


class TestCelsiusEquivalent:
    def test_fahrenheit(self):
        assert to_celsius_equivalent("FahrenheitToCelsius", 212.0) == pytest.approx(100.0)

    def test_target_unit_is_ignored(self):
        assert to_celsius_equivalent("KelvinToFahrenheit", 32.0) == pytest.approx(-241.15)
        assert to_celsius_equivalent("CelsiusToFahrenheit", -300.0) == -300.0

    def test_kelvin(self):
        assert to_celsius_equivalent("KelvinToCelsius", 0.0) == -273.15

    def test_celsius(self):
        assert to_celsius_equivalent("CelsiusToKelvin", -10.0) == -10.0


class TestValidate:
    def test_valid_values_pass(self):
        validate("CelsiusToKelvin", -273.15)
        validate("MetersToFeet", 0.0)
        validate("InvalidType", -1e9)

    def test_temperature_rule(self):
        with pytest.raises(BelowAbsoluteZeroError):
            validate("CelsiusToFahrenheit", -274.0)

    def test_celsius_source_below_zero_passes(self):
        validate("CelsiusToKelvin", -10.0)
        validate("CelsiusToFahrenheit", -273.15)

    def test_first_failing_category_wins(self):
        with pytest.raises(BelowAbsoluteZeroError):
            validate("CelsiusToFeet", -300.0)
        with pytest.raises(NegativeValueError) as exc_info:
            validate("CelsiusToFeet", -1.0)
        assert exc_info.value.category is Category.DISTANCE


class TestClamp:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0.0),
            (1e6, 1e6),
            (-1e6, -1e6),
            (1e6 + 0.5, 1e6),
            (-2e6, -1e6),
            (float("inf"), 1e6),
            (float("-inf"), -1e6),
        ],
    )
    def test_clamp(self, value, expected):
        assert clamp(value) == expected

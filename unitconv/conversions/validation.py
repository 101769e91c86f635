"""Input validation and clamping for conversions.

Categories are detected by scanning the conversion name for unit keywords,
not from the registry entry. A name can match several categories
(``FluidOuncesToMilliliters`` contains both ``Ounces`` and ``Liters``), and
every matched category's rule is applied in the order of ``CATEGORY_KEYWORDS``.
"""

from __future__ import annotations

import logging

from unitconv.config import ConversionConfig
from unitconv.core.errors import BelowAbsoluteZeroError, NegativeValueError
from unitconv.core.types import Category

logger = logging.getLogger(__name__)

# Checked in this order; the first failing rule raises
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.TEMPERATURE: ("Celsius", "Fahrenheit", "Kelvin"),
    Category.DISTANCE: ("Kilometers", "Miles", "Meters", "Feet"),
    Category.WEIGHT: ("Kilograms", "Pounds", "Grams", "Ounces"),
    Category.VOLUME: ("Liters", "Gallons", "Milliliters", "FluidOunces"),
}


def detect_categories(name: str) -> tuple[Category, ...]:
    """Return every category whose keywords occur in ``name``.

    Matching is case-sensitive, so ``Kilometers`` does not match ``Meters``.
    """
    return tuple(
        category
        for category, keywords in CATEGORY_KEYWORDS.items()
        if any(keyword in name for keyword in keywords)
    )


def source_unit(name: str) -> str:
    """Return the part of ``name`` before ``To``, or the whole name if there is none."""
    return name.split("To", 1)[0]


def to_celsius_equivalent(name: str, value: float) -> float:
    """Interpret ``value`` in the source unit of ``name`` and express it in Celsius.

    Only the source unit counts: ``CelsiusToKelvin`` takes its input in Celsius.
    """
    source = source_unit(name)
    if "Fahrenheit" in source:
        return (value - 32.0) * 5.0 / 9.0
    if "Kelvin" in source:
        return value - ConversionConfig.KELVIN_OFFSET
    return value


def validate(name: str, value: float) -> None:
    """Raise a ``ConversionError`` if ``value`` is physically invalid for ``name``.

    Raises:
        BelowAbsoluteZeroError: Temperature below -273.15 degrees Celsius.
        NegativeValueError: Negative distance, weight or volume.
    """
    for category in detect_categories(name):
        if category is Category.TEMPERATURE:
            celsius = to_celsius_equivalent(name, value)
            if celsius < ConversionConfig.ABSOLUTE_ZERO_CELSIUS:
                logger.info("Rejected %s(%r): below absolute zero", name, value)
                raise BelowAbsoluteZeroError()
        elif value < 0:
            logger.info("Rejected %s(%r): negative %s", name, value, category.value)
            raise NegativeValueError(category)


def clamp(value: float) -> float:
    """Bound ``value`` to [CLAMP_MIN, CLAMP_MAX]; values on the bounds pass through."""
    if value > ConversionConfig.CLAMP_MAX:
        return ConversionConfig.CLAMP_MAX
    if value < ConversionConfig.CLAMP_MIN:
        return ConversionConfig.CLAMP_MIN
    return value

"""Built-in conversion tables, one per category.

Each table pairs a ``ConversionName`` with its transform. Inverse
conversions divide by the same factor the forward conversion multiplies by.
"""

from __future__ import annotations

from collections.abc import Callable

from unitconv.config import ConversionConfig
from unitconv.core.types import Category, ConversionName

Transform = Callable[[float], float]
ConversionTable = tuple[tuple[ConversionName, Transform], ...]

KM_TO_MILES = 0.621371
M_TO_FEET = 3.28084
KG_TO_POUNDS = 2.20462
G_TO_OUNCES = 0.035274
L_TO_GALLONS = 0.264172
ML_TO_FLUID_OUNCES = 0.033814

_KELVIN = ConversionConfig.KELVIN_OFFSET


TEMPERATURE: ConversionTable = (
    (ConversionName.CELSIUS_TO_FAHRENHEIT, lambda c: (c * 9.0 / 5.0) + 32.0),
    (ConversionName.FAHRENHEIT_TO_CELSIUS, lambda f: (f - 32.0) * 5.0 / 9.0),
    (ConversionName.CELSIUS_TO_KELVIN, lambda c: c + _KELVIN),
    (ConversionName.KELVIN_TO_CELSIUS, lambda k: k - _KELVIN),
)

DISTANCE: ConversionTable = (
    (ConversionName.KILOMETERS_TO_MILES, lambda km: km * KM_TO_MILES),
    (ConversionName.MILES_TO_KILOMETERS, lambda mi: mi / KM_TO_MILES),
    (ConversionName.METERS_TO_FEET, lambda m: m * M_TO_FEET),
    (ConversionName.FEET_TO_METERS, lambda ft: ft / M_TO_FEET),
)

WEIGHT: ConversionTable = (
    (ConversionName.KILOGRAMS_TO_POUNDS, lambda kg: kg * KG_TO_POUNDS),
    (ConversionName.POUNDS_TO_KILOGRAMS, lambda lb: lb / KG_TO_POUNDS),
    (ConversionName.GRAMS_TO_OUNCES, lambda g: g * G_TO_OUNCES),
    (ConversionName.OUNCES_TO_GRAMS, lambda oz: oz / G_TO_OUNCES),
)

VOLUME: ConversionTable = (
    (ConversionName.LITERS_TO_GALLONS, lambda l: l * L_TO_GALLONS),  # noqa: E741
    (ConversionName.GALLONS_TO_LITERS, lambda gal: gal / L_TO_GALLONS),
    (ConversionName.MILLILITERS_TO_FLUID_OUNCES, lambda ml: ml * ML_TO_FLUID_OUNCES),
    (ConversionName.FLUID_OUNCES_TO_MILLILITERS, lambda fl_oz: fl_oz / ML_TO_FLUID_OUNCES),
)

# Registration order: temperature, distance, weight, volume
CATEGORY_TABLES: dict[Category, ConversionTable] = {
    Category.TEMPERATURE: TEMPERATURE,
    Category.DISTANCE: DISTANCE,
    Category.WEIGHT: WEIGHT,
    Category.VOLUME: VOLUME,
}

# (forward, inverse) pairs
INVERSE_PAIRS: tuple[tuple[ConversionName, ConversionName], ...] = (
    (ConversionName.CELSIUS_TO_FAHRENHEIT, ConversionName.FAHRENHEIT_TO_CELSIUS),
    (ConversionName.CELSIUS_TO_KELVIN, ConversionName.KELVIN_TO_CELSIUS),
    (ConversionName.KILOMETERS_TO_MILES, ConversionName.MILES_TO_KILOMETERS),
    (ConversionName.METERS_TO_FEET, ConversionName.FEET_TO_METERS),
    (ConversionName.KILOGRAMS_TO_POUNDS, ConversionName.POUNDS_TO_KILOGRAMS),
    (ConversionName.GRAMS_TO_OUNCES, ConversionName.OUNCES_TO_GRAMS),
    (ConversionName.LITERS_TO_GALLONS, ConversionName.GALLONS_TO_LITERS),
    (ConversionName.MILLILITERS_TO_FLUID_OUNCES, ConversionName.FLUID_OUNCES_TO_MILLILITERS),
)

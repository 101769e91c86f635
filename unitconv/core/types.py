"""Shared type definitions for the application.

The two enums form the closed set of categories and conversion identifiers.
"""

from __future__ import annotations

from enum import Enum

# =============================================================================
# Conversion Identifiers
# =============================================================================


class Category(str, Enum):
    """Physical quantity a conversion belongs to."""

    TEMPERATURE = "temperature"
    DISTANCE = "distance"
    WEIGHT = "weight"
    VOLUME = "volume"


class ConversionName(str, Enum):
    """Every built-in conversion. Values are the public identifiers."""

    CELSIUS_TO_FAHRENHEIT = "CelsiusToFahrenheit"
    FAHRENHEIT_TO_CELSIUS = "FahrenheitToCelsius"
    CELSIUS_TO_KELVIN = "CelsiusToKelvin"
    KELVIN_TO_CELSIUS = "KelvinToCelsius"

    KILOMETERS_TO_MILES = "KilometersToMiles"
    MILES_TO_KILOMETERS = "MilesToKilometers"
    METERS_TO_FEET = "MetersToFeet"
    FEET_TO_METERS = "FeetToMeters"

    KILOGRAMS_TO_POUNDS = "KilogramsToPounds"
    POUNDS_TO_KILOGRAMS = "PoundsToKilograms"
    GRAMS_TO_OUNCES = "GramsToOunces"
    OUNCES_TO_GRAMS = "OuncesToGrams"

    LITERS_TO_GALLONS = "LitersToGallons"
    GALLONS_TO_LITERS = "GallonsToLiters"
    MILLILITERS_TO_FLUID_OUNCES = "MillilitersToFluidOunces"
    FLUID_OUNCES_TO_MILLILITERS = "FluidOuncesToMilliliters"

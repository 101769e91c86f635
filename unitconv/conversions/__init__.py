"""Unit conversion system.

Provides the fixed registry of temperature, distance, weight and volume
conversions.
"""
from unitconv.conversions.registry import (
    ConversionEntry,
    ConversionRegistry,
)
from unitconv.conversions.tables import CATEGORY_TABLES, INVERSE_PAIRS
from unitconv.conversions.validation import clamp, detect_categories, validate

__all__ = [
    "CATEGORY_TABLES",
    "INVERSE_PAIRS",
    "ConversionEntry",
    "ConversionRegistry",
    "clamp",
    "detect_categories",
    "validate",
]

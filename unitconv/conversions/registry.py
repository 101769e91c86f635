"""Conversion registry for physical unit transformations.

Holds the fixed set of built-in conversions and applies the validation and
clamping policy before dispatching to a transform by name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from unitconv.conversions.tables import CATEGORY_TABLES, Transform
from unitconv.conversions.validation import clamp, validate
from unitconv.core.errors import UnknownConversionError
from unitconv.core.types import Category, ConversionName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionEntry:
    """A registered conversion between two units of one category."""

    name: ConversionName
    category: Category
    transform: Transform

    def __call__(self, value: float) -> float:
        return self.transform(value)


def _name_value(name: str | ConversionName) -> str:
    # str(ConversionName.X) is "ConversionName.X" on recent Pythons
    return name.value if isinstance(name, ConversionName) else name


class ConversionRegistry:
    """Registry of the built-in unit conversions.

    Populated once at construction; the mapping is exposed read-only and
    never changes afterwards, so a single instance can be shared freely
    between threads.
    """

    def __init__(self) -> None:
        conversions: dict[ConversionName, ConversionEntry] = {}
        for category, table in CATEGORY_TABLES.items():
            for name, transform in table:
                if name in conversions:
                    raise ValueError(f"Duplicate conversion: {name.value}")
                conversions[name] = ConversionEntry(name, category, transform)
        self._conversions = MappingProxyType(conversions)
        logger.debug("Registered %d conversions", len(self._conversions))

    def __len__(self) -> int:
        return len(self._conversions)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            return ConversionName(_name_value(name)) in self._conversions
        except ValueError:
            return False

    def __iter__(self) -> Iterator[ConversionName]:
        return iter(self._conversions)

    def get(self, name: str | ConversionName) -> ConversionEntry:
        """Look up a conversion by exact, case-sensitive name.

        Raises:
            UnknownConversionError: If nothing is registered under ``name``.
        """
        raw = _name_value(name)
        try:
            return self._conversions[ConversionName(raw)]
        except (ValueError, KeyError):
            raise UnknownConversionError(raw) from None

    def names(self) -> list[ConversionName]:
        """Return all conversion names in registration order."""
        return list(self._conversions)

    def entries(self) -> Iterable[ConversionEntry]:
        return self._conversions.values()

    def by_category(self, category: Category) -> list[ConversionEntry]:
        """Return the conversions of one category in registration order."""
        return [entry for entry in self._conversions.values() if entry.category is category]

    def convert(self, name: str | ConversionName, value: float) -> float:
        """Convert ``value`` using the conversion registered as ``name``.

        The value is validated against every category whose unit keywords
        appear in ``name``, then clamped to [-1e6, 1e6], and only then is the
        name looked up. A name without any unit keyword therefore skips
        validation and fails at lookup.

        Raises:
            BelowAbsoluteZeroError: Temperature below absolute zero.
            NegativeValueError: Negative distance, weight or volume.
            UnknownConversionError: ``name`` is not registered.
        """
        raw = _name_value(name)
        validate(raw, value)

        clamped = clamp(value)
        if clamped != value:
            logger.debug("Clamped %s input %r to %r", raw, value, clamped)

        return self.get(raw)(clamped)

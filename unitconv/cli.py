"""Interactive console menu for the unit converter.

The menu reads from and writes to injected text streams, so it can be
driven by ``io.StringIO`` in tests as well as by the real console.
"""

from __future__ import annotations

import logging
import math
from typing import TextIO

from unitconv.config import MenuConfig
from unitconv.conversions.registry import ConversionRegistry
from unitconv.core.errors import ConversionError
from unitconv.core.types import Category

logger = logging.getLogger(__name__)

# Main menu options 1-4, in display order
MENU_CATEGORIES: tuple[Category, ...] = (
    Category.TEMPERATURE,
    Category.DISTANCE,
    Category.WEIGHT,
    Category.VOLUME,
)


def format_result(value: float) -> str:
    return f"{value:.{MenuConfig.RESULT_DECIMALS}f}"


def parse_value(text: str) -> float | None:
    """Parse a finite float, or return None if ``text`` is not one."""
    try:
        value = float(text.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def parse_choice(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


class ConverterMenu:
    """Line-oriented menu loop around a ``ConversionRegistry``."""

    def __init__(
        self,
        registry: ConversionRegistry,
        reader: TextIO,
        writer: TextIO,
        error_writer: TextIO | None = None,
    ) -> None:
        self.registry = registry
        self.reader = reader
        self.writer = writer
        self.error_writer = error_writer if error_writer is not None else writer

    def _write(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()

    def _error(self, text: str) -> None:
        self.error_writer.write(text + "\n")
        self.error_writer.flush()

    def _read_line(self) -> str:
        line = self.reader.readline()
        if not line:
            raise EOFError
        return line

    def display_menu(self) -> None:
        lines = ["", "Unit Converter"]
        for option, category in enumerate(MENU_CATEGORIES, start=1):
            lines.append(f"{option}. Convert {category.value.capitalize()}")
        lines.append(f"{MenuConfig.EXIT_OPTION}. Exit")
        self._write("\n".join(lines) + "\nChoose an option: ")

    def run(self) -> None:
        """Show the main menu until the user exits or input runs out."""
        try:
            while True:
                self.display_menu()
                choice = parse_choice(self._read_line())
                if choice is None:
                    self._error(
                        "Invalid input. Please enter a number corresponding to the menu option."
                    )
                elif choice == MenuConfig.EXIT_OPTION:
                    self._write("Exiting...\n")
                    return
                elif 1 <= choice <= len(MENU_CATEGORIES):
                    self.convert_category(MENU_CATEGORIES[choice - 1])
                else:
                    self._error("Invalid option. Please try again.")
        except EOFError:
            logger.debug("Input exhausted, leaving menu")

    def convert_category(self, category: Category) -> float | None:
        """Prompt for a value and a conversion of ``category`` and print the result.

        Returns the converted value, or None if the input was rejected.
        Raises EOFError if input runs out mid-prompt.
        """
        self._write(f"Enter {category.value} value: ")
        value = parse_value(self._read_line())
        if value is None:
            self._error("Invalid input. Please enter a numeric value.")
            return None

        entries = self.registry.by_category(category)
        lines = ["Choose conversion type:"]
        lines.extend(f"{i}. {entry.name.value}" for i, entry in enumerate(entries, start=1))
        self._write("\n".join(lines) + "\nEnter choice: ")

        choice = parse_choice(self._read_line())
        if choice is None or not 1 <= choice <= len(entries):
            self._error("Invalid conversion selection.")
            return None

        try:
            result = self.registry.convert(entries[choice - 1].name, value)
        except ConversionError as e:
            self._error(f"Error: {e}")
            return None

        self._write(f"Converted value: {format_result(result)}\n")
        return result

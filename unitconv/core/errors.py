"""Conversion errors and standardized HTTP error helpers.

The ``ConversionError`` hierarchy is raised by the registry. Route handlers
translate it into ``HTTPException`` through the factories below so every
endpoint reports errors the same way.
"""
from __future__ import annotations

from fastapi import HTTPException

from unitconv.core.types import Category


class ConversionError(ValueError):
    """Base class for failures reported by ``ConversionRegistry.convert``."""


class BelowAbsoluteZeroError(ConversionError):
    """Temperature input whose Celsius equivalent is below -273.15."""

    def __init__(self) -> None:
        super().__init__("Temperature value below absolute zero is not valid.")


class NegativeValueError(ConversionError):
    """Negative input for a distance, weight or volume conversion."""

    def __init__(self, category: Category) -> None:
        self.category = category
        super().__init__(f"Negative {category.value} values are not valid.")


class UnknownConversionError(ConversionError):
    """No conversion is registered under the given name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid conversion type: {name}")


def not_found(resource_type: str, resource_id: str) -> HTTPException:
    """Create a 404 Not Found exception with consistent formatting.

    Args:
        resource_type: Type of resource (e.g., "Conversion")
        resource_id: The identifier that was not found

    Returns:
        HTTPException with status 404
    """
    return HTTPException(
        status_code=404,
        detail=f"{resource_type} not found: {resource_id}",
    )


def bad_request(message: str) -> HTTPException:
    """Create a 400 Bad Request exception.

    Args:
        message: Description of what was wrong with the request

    Returns:
        HTTPException with status 400
    """
    return HTTPException(status_code=400, detail=message)


def conversion_rejected(error: ConversionError) -> HTTPException:
    """Map a registry failure onto the matching HTTP error."""
    if isinstance(error, UnknownConversionError):
        return not_found("Conversion", error.name)
    return bad_request(safe_error_message(error))


def safe_error_message(error: Exception) -> str:
    """Extract a safe error message from an exception.

    Avoids leaking internal details while preserving useful information.

    Args:
        error: The exception to extract message from

    Returns:
        A safe string representation of the error
    """
    # For ValueError, the message is usually safe to show
    if isinstance(error, ValueError):
        return str(error)
    # For other exceptions, just show the type
    return type(error).__name__

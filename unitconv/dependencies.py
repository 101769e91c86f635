"""FastAPI dependency injection factories and shared type aliases.

Route handlers declare the registry through ``ConversionRegistryDep``;
tests can swap it with ``app.dependency_overrides[get_conversion_registry]``.

Usage in routes:
    from unitconv.dependencies import ConversionRegistryDep

    @router.get("/conversions")
    def list_conversions(registry: ConversionRegistryDep) -> list[ConversionSummary]:
        ...
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from unitconv.conversions.registry import ConversionRegistry


@lru_cache(maxsize=1)
def get_conversion_registry() -> ConversionRegistry:
    """Get the conversion registry singleton."""
    return ConversionRegistry()


def reset_dependencies() -> None:
    """Reset all cached dependencies.

    Call this in test fixtures to ensure fresh instances between tests.
    """
    get_conversion_registry.cache_clear()


ConversionRegistryDep = Annotated[ConversionRegistry, Depends(get_conversion_registry)]

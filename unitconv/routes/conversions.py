from __future__ import annotations

import logging

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from unitconv.core.errors import ConversionError, conversion_rejected
from unitconv.core.types import Category, ConversionName
from unitconv.dependencies import ConversionRegistryDep

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["conversions"])


class ConversionSummary(BaseModel):
    """A registered conversion."""

    model_config = ConfigDict(frozen=True)

    name: ConversionName
    category: Category


class ConvertRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Plain str so unknown names reach the registry and get its error
    name: str
    value: float = Field(allow_inf_nan=False)


class ConvertResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: ConversionName
    value: float
    result: float


@router.get("/conversions", response_model=list[ConversionSummary])
def list_conversions(
    registry: ConversionRegistryDep, category: Category | None = None
) -> list[ConversionSummary]:
    """List registered conversions, optionally limited to one category."""
    entries = registry.by_category(category) if category is not None else registry.entries()
    return [ConversionSummary(name=e.name, category=e.category) for e in entries]


@router.post("/convert", response_model=ConvertResponse)
def convert(request: ConvertRequest, registry: ConversionRegistryDep) -> ConvertResponse:
    """Convert a single value.

    Returns 404 for an unknown conversion name and 400 for a value the
    conversion rejects (below absolute zero, negative quantity).
    """
    try:
        result = registry.convert(request.name, request.value)
    except ConversionError as e:
        logger.info("Conversion rejected: %s", e)
        raise conversion_rejected(e) from e
    return ConvertResponse(name=ConversionName(request.name), value=request.value, result=result)

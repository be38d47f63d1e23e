"""
Health check endpoints.

Provides a liveness probe and a readiness probe reporting card data.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from runedeck.services.card_index import CardIndex, get_card_index

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    cards: int | None = None


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health() -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running.
    Does not check card data.
    """
    return HealthResponse(status="healthy")


@router.get("/ready", response_model=HealthResponse)
async def ready(index: Annotated[CardIndex, Depends(get_card_index)]) -> HealthResponse:
    """
    Readiness probe.

    Reports the number of indexed cards. Zero cards is still ready:
    decks then display with "Unknown card" names.
    """
    return HealthResponse(status="ready", cards=len(index))

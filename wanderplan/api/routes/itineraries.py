"""Itinerary endpoint - POST /itineraries."""

import logging
from functools import lru_cache
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, status

from wanderplan.llm.client import GenerationClient, get_llm_client
from wanderplan.models.preferences import TripPreferences
from wanderplan.pipeline.errors import GENERIC_FAILURE_MESSAGE, GenerationError
from wanderplan.pipeline.generate import generate_itinerary

router = APIRouter(prefix="/itineraries", tags=["itineraries"])
logger = logging.getLogger(__name__)


@lru_cache
def get_client() -> GenerationClient:
    """Dependency returning the configured generation client, shared across requests."""
    return get_llm_client()


@router.post("", status_code=status.HTTP_200_OK)
async def create_itinerary(
    prefs: TripPreferences,
    client: Annotated[GenerationClient, Depends(get_client)],
) -> dict[str, Any]:
    """Generate an itinerary from trip preferences.

    Args:
        prefs: Destination, duration, travelers, budget tier and interests
        client: Generation client

    Returns:
        TripItinerary as camelCase JSON

    Raises:
        HTTPException: 422 if the preferences cannot be submitted,
            502 if generation fails
    """
    if not prefs.is_submittable():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="destination and at least one interest are required",
        )

    logger.info(f"[POST /itineraries] destination={prefs.destination!r}, days={prefs.duration}")

    try:
        itinerary = await generate_itinerary(prefs, client=client)
    except GenerationError as e:
        logger.error(f"[POST /itineraries] generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=GENERIC_FAILURE_MESSAGE,
        ) from e

    logger.info(f"[POST /itineraries] succeeded, {len(itinerary.days)} days")
    return itinerary.model_dump(mode="json", by_alias=True)

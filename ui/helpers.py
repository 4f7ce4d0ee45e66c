"""Helper functions for UI - backend client and view-model builders."""

from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from pydantic import ValidationError

from wanderplan.config import Settings
from wanderplan.features.budget import aggregate_costs_by_category
from wanderplan.models.itinerary import DayPlan, TripItinerary
from wanderplan.models.preferences import TripPreferences
from wanderplan.pipeline.errors import GenerationError, GenerationErrorKind
from wanderplan.pipeline.generate import generate_itinerary

TIME_SLOT_ICONS = {
    "Morning": "🌅",
    "Afternoon": "☀️",
    "Evening": "🌙",
}

CATEGORY_ICONS = {
    "Food": "🍽️",
    "Sightseeing": "🏛️",
    "Activity": "🎯",
    "Relaxation": "🧘",
}


async def call_generate_itinerary(backend_url: str, prefs: TripPreferences) -> TripItinerary:
    """Call POST /itineraries with the user's preferences.

    No client-side timeout is set; the backend's generation transport bounds
    the request.

    Args:
        backend_url: Backend base URL (e.g. http://localhost:8000)
        prefs: Trip preferences from the wizard

    Returns:
        Parsed TripItinerary

    Raises:
        GenerationError: SERVICE_FAILURE if the request fails or returns an
            error status, INVALID_FORMAT if the body is not an itinerary
    """
    try:
        async with httpx.AsyncClient(timeout=None) as client:
            response = await client.post(
                f"{backend_url}/itineraries",
                json=prefs.model_dump(mode="json"),
            )
            response.raise_for_status()
    except httpx.HTTPError as e:
        raise GenerationError(
            f"Backend request failed: {type(e).__name__}",
            GenerationErrorKind.SERVICE_FAILURE,
        ) from e

    try:
        return TripItinerary.model_validate_json(response.text)
    except ValidationError as e:
        raise GenerationError(
            "Backend returned an invalid itinerary",
            GenerationErrorKind.INVALID_FORMAT,
        ) from e


def make_generator(settings: Settings) -> Callable[[TripPreferences], Awaitable[TripItinerary]]:
    """Pick how the UI generates itineraries: via the backend or in-process."""
    if settings.ui_call_backend:

        async def remote(prefs: TripPreferences) -> TripItinerary:
            return await call_generate_itinerary(settings.backend_url, prefs)

        return remote

    async def local(prefs: TripPreferences) -> TripItinerary:
        return await generate_itinerary(prefs, settings=settings)

    return local


def build_timeline_rows(day: DayPlan, currency: str) -> list[dict[str, Any]]:
    """Flatten a day's activities into display rows, in itinerary order."""
    rows = []
    for index, activity in enumerate(day.activities):
        cost = (
            f"{currency} {activity.cost_estimate:g}"
            if activity.cost_estimate
            else "Free / n.a."
        )
        rows.append(
            {
                "id": f"{day.day_number}-{index}",
                "slot": f"{TIME_SLOT_ICONS.get(activity.time_slot, '🕒')} {activity.time_slot}",
                "category": f"{CATEGORY_ICONS.get(activity.category, '')} {activity.category}".strip(),
                "name": activity.name,
                "description": activity.description,
                "duration": activity.duration,
                "location": activity.location,
                "cost": cost,
                "map_link": activity.map_link,
            }
        )
    return rows


def budget_chart_data(itinerary: TripItinerary, travelers: int) -> dict[str, list[Any]]:
    """Column data for the budget bar chart; empty lists when no costs exist."""
    breakdown = aggregate_costs_by_category(itinerary, travelers)
    return {
        "category": [item.category for item in breakdown],
        "amount": [item.amount for item in breakdown],
    }

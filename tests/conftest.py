"""Shared pytest fixtures for all test suites."""

import json
from typing import Any

import pytest

from wanderplan.models.itinerary import TripItinerary
from wanderplan.models.preferences import TripPreferences


@pytest.fixture
def kyoto_prefs() -> TripPreferences:
    """Submittable preferences for a short Kyoto trip."""
    return TripPreferences(
        destination="Kyoto",
        duration=3,
        travelers=2,
        budget="Moderate",
        interests=["Food"],
    )


@pytest.fixture
def itinerary_payload() -> dict[str, Any]:
    """Wire-format (camelCase) itinerary as the model would return it."""
    return {
        "destination": "Kyoto, Japan",
        "summary": "Temples, markets and bamboo groves in three easy days.",
        "currency": "JPY",
        "totalEstimatedCost": 70,
        "detailedReport": {
            "logistics": "Buy an ICOCA card for buses and trains.",
            "packingTips": "Comfortable shoes for temple steps.",
            "whyThisFits": "Heavy on street food and markets.",
            "localEtiquette": "Remove shoes when entering temples.",
        },
        "days": [
            {
                "dayNumber": 1,
                "title": "Southern Shrines & Markets",
                "activities": [
                    {
                        "name": "Visit Fushimi Inari Shrine",
                        "description": "Walk through thousands of torii gates.",
                        "timeSlot": "Morning",
                        "duration": "2h",
                        "location": "68 Fukakusa Yabunouchicho",
                        "coordinates": {"lat": 34.9671, "lng": 135.7727},
                        "costEstimate": 0,
                        "category": "Sightseeing",
                    },
                    {
                        "name": "Nishiki Market Food Tour",
                        "description": "Graze through Kyoto's kitchen.",
                        "timeSlot": "Afternoon",
                        "duration": "3h",
                        "location": "Nishikikoji-dori",
                        "coordinates": {"lat": 35.005, "lng": 135.7649},
                        "costEstimate": 10,
                        "category": "Food",
                    },
                    {
                        "name": "Gion Evening Stroll",
                        "description": "Lantern-lit lanes of the geisha district.",
                        "timeSlot": "Evening",
                        "duration": "1.5h",
                        "category": "Relaxation",
                    },
                ],
            },
            {
                "dayNumber": 2,
                "title": "Golden Pavilion",
                "activities": [
                    {
                        "name": "Kinkaku-ji Temple",
                        "description": "The gold-leaf pavilion over its mirror pond.",
                        "timeSlot": "Morning",
                        "duration": "1.5h",
                        "coordinates": {"lat": 35.0394, "lng": 135.7292},
                        "costEstimate": 5,
                        "category": "Sightseeing",
                    },
                    {
                        "name": "Ramen Lunch",
                        "description": "Rich tonkotsu near the station.",
                        "timeSlot": "Afternoon",
                        "duration": "1h",
                        "costEstimate": 20,
                        "category": "Food",
                    },
                ],
            },
            {
                "dayNumber": 3,
                "title": "Arashiyama",
                "activities": [
                    {
                        "name": "Arashiyama Bamboo Grove",
                        "description": "Towering bamboo stalks at dawn.",
                        "timeSlot": "Morning",
                        "duration": "1h",
                        "coordinates": {"lat": 35.017, "lng": 135.6713},
                        "category": "Activity",
                    }
                ],
            },
        ],
    }


@pytest.fixture
def itinerary_json(itinerary_payload: dict[str, Any]) -> str:
    """Itinerary payload serialized as JSON text."""
    return json.dumps(itinerary_payload)


@pytest.fixture
def kyoto_itinerary(itinerary_json: str) -> TripItinerary:
    """Parsed sample itinerary."""
    return TripItinerary.model_validate_json(itinerary_json)

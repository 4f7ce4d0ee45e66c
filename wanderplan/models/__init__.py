"""Models package - re-exports for convenience."""

from wanderplan.models.common import (
    ACTIVITY_CATEGORIES,
    BUDGET_TIERS,
    ActivityCategory,
    BudgetTier,
    Coordinates,
    TimeSlot,
)
from wanderplan.models.itinerary import Activity, DayPlan, DetailedReport, TripItinerary
from wanderplan.models.preferences import INTEREST_OPTIONS, MAX_TRIP_DAYS, TripPreferences

__all__ = [
    # Common
    "ActivityCategory",
    "BudgetTier",
    "TimeSlot",
    "ACTIVITY_CATEGORIES",
    "BUDGET_TIERS",
    "Coordinates",
    # Preferences
    "TripPreferences",
    "INTEREST_OPTIONS",
    "MAX_TRIP_DAYS",
    # Itinerary
    "TripItinerary",
    "DayPlan",
    "Activity",
    "DetailedReport",
]

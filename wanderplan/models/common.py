"""Common types shared across all models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BudgetTier = Literal["Budget", "Moderate", "Luxury"]
TimeSlot = Literal["Morning", "Afternoon", "Evening"]
ActivityCategory = Literal["Food", "Sightseeing", "Activity", "Relaxation"]

BUDGET_TIERS: tuple[BudgetTier, ...] = ("Budget", "Moderate", "Luxury")
ACTIVITY_CATEGORIES: tuple[ActivityCategory, ...] = ("Food", "Sightseeing", "Activity", "Relaxation")


class WireModel(BaseModel):
    """Base for models exchanged with the generation service.

    Field names are snake_case in Python and camelCase on the wire. Wrong JSON
    types are rejected rather than coerced; unknown keys are ignored.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")


class Coordinates(WireModel):
    """Geographic coordinates (WGS84)."""

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

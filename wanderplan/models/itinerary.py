"""Itinerary models - generated trip plan for user consumption."""

from collections.abc import Iterator
from typing import Any

from pydantic import Field, field_validator

from wanderplan.models.common import ActivityCategory, Coordinates, TimeSlot, WireModel


class Activity(WireModel):
    """Single activity in a day plan."""

    name: str = Field(..., min_length=1)
    description: str
    time_slot: TimeSlot = Field(..., alias="timeSlot")
    duration: str = Field(..., description="Free text, e.g. '2h'")
    location: str | None = None
    coordinates: Coordinates | None = None
    cost_estimate: float | None = Field(None, ge=0, alias="costEstimate")
    category: ActivityCategory
    # Only ever set by grounding enrichment
    map_link: str | None = Field(None, alias="googleMapLink")


class DayPlan(WireModel):
    """Activities for a single day, in itinerary order."""

    day_number: int = Field(..., gt=0, alias="dayNumber")
    title: str
    activities: list[Activity]


class DetailedReport(WireModel):
    """Long-form notes accompanying the itinerary."""

    logistics: str
    packing_tips: str = Field(..., alias="packingTips")
    why_this_fits: str = Field(..., alias="whyThisFits")
    local_etiquette: str = Field(..., alias="localEtiquette")


class TripItinerary(WireModel):
    """Complete itinerary output."""

    destination: str
    summary: str
    currency: str
    total_estimated_cost: float = Field(..., ge=0, alias="totalEstimatedCost")
    days: list[DayPlan] = Field(..., min_length=1)
    detailed_report: DetailedReport | None = Field(None, alias="detailedReport")
    # Raw citation records, kept only to drive map-link enrichment
    grounding_metadata: list[dict[str, Any]] | None = Field(None, alias="groundingMetadata")

    @field_validator("days")
    @classmethod
    def validate_unique_day_numbers(cls, v: list[DayPlan]) -> list[DayPlan]:
        """Ensure no two days share a day number."""
        numbers = [day.day_number for day in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("dayNumber must be unique within a trip")
        return v

    def get_day(self, day_number: int) -> DayPlan | None:
        """Look up a day plan by its number."""
        for day in self.days:
            if day.day_number == day_number:
                return day
        return None

    def iter_activities(self) -> Iterator[tuple[DayPlan, int, Activity]]:
        """Yield (day, index within day, activity) in itinerary order."""
        for day in self.days:
            for index, activity in enumerate(day.activities):
                yield day, index, activity

"""Preference models - user input collected by the wizard."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wanderplan.models.common import BudgetTier

INTEREST_OPTIONS = [
    "History",
    "Art",
    "Food",
    "Nature",
    "Nightlife",
    "Shopping",
    "Adventure",
    "Relaxation",
    "Photography",
    "Architecture",
]

MAX_TRIP_DAYS = 14


class TripPreferences(BaseModel):
    """Trip request built field-by-field in the wizard.

    The destination may be blank while the user is still typing; submission is
    gated separately by ``is_submittable``.
    """

    model_config = ConfigDict(frozen=True)

    destination: str = ""
    duration: int = Field(3, ge=1, le=MAX_TRIP_DAYS, description="Trip length in days")
    travelers: int = Field(1, ge=1)
    budget: BudgetTier = "Moderate"
    interests: list[str] = Field(default_factory=list)

    @field_validator("interests")
    @classmethod
    def dedupe_interests(cls, v: list[str]) -> list[str]:
        """Keep interests unique, in selection order."""
        seen: list[str] = []
        for tag in v:
            tag = tag.strip()
            if tag and tag not in seen:
                seen.append(tag)
        return seen

    def is_submittable(self) -> bool:
        """Destination filled in and at least one interest picked."""
        return bool(self.destination.strip()) and len(self.interests) > 0

    def with_changes(self, **changes: Any) -> "TripPreferences":
        """Return a validated copy with the given fields replaced.

        Raises:
            pydantic.ValidationError: If a changed field is out of range
        """
        return TripPreferences.model_validate({**self.model_dump(), **changes})

    def toggle_interest(self, interest: str) -> "TripPreferences":
        """Add the interest if missing, otherwise remove it."""
        interest = interest.strip()
        if interest in self.interests:
            interests = [i for i in self.interests if i != interest]
        else:
            interests = [*self.interests, interest]
        return self.with_changes(interests=interests)

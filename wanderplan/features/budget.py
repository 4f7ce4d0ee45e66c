"""Budget aggregation for the cost breakdown chart."""

from pydantic import BaseModel

from wanderplan.models.common import ActivityCategory
from wanderplan.models.itinerary import TripItinerary


class CategoryCost(BaseModel):
    """Total spend for one activity category across all travelers."""

    category: ActivityCategory
    amount: float


def aggregate_costs_by_category(itinerary: TripItinerary, travelers: int) -> list[CategoryCost]:
    """Sum per-person cost estimates by category and scale by traveler count.

    Categories appear in the order first seen in the itinerary; categories
    totalling zero are dropped. Activities without an estimate count as 0.
    """
    totals: dict[ActivityCategory, float] = {}
    for _, _, activity in itinerary.iter_activities():
        totals[activity.category] = totals.get(activity.category, 0.0) + (
            activity.cost_estimate or 0.0
        )

    return [
        CategoryCost(category=category, amount=amount * travelers)
        for category, amount in totals.items()
        if amount * travelers > 0
    ]


def total_activity_cost(itinerary: TripItinerary, travelers: int) -> float:
    """Grand total of the aggregated category costs."""
    return sum(item.amount for item in aggregate_costs_by_category(itinerary, travelers))

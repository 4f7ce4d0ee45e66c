"""Deep links into Google Maps directions.

Routing is not computed here; these helpers only build URLs that the UI opens
in a new browser tab.
"""

from collections.abc import Sequence
from typing import Literal
from urllib.parse import urlencode

from wanderplan.models.itinerary import Activity

TravelMode = Literal["driving", "walking", "transit"]

TRAVEL_MODES: tuple[TravelMode, ...] = ("driving", "transit", "walking")

DIRECTIONS_BASE_URL = "https://www.google.com/maps/dir/"


def format_location(activity: Activity, destination: str) -> str:
    """Coordinates when known, otherwise a 'name, destination' text query."""
    if activity.coordinates is not None:
        return f"{activity.coordinates.lat},{activity.coordinates.lng}"
    return f"{activity.name}, {destination}"


def build_route_url(
    activities: Sequence[Activity],
    destination: str,
    travel_mode: TravelMode = "driving",
) -> str | None:
    """Directions URL visiting a day's activities in itinerary order.

    The first activity is the origin, the last one the destination, and the
    ones in between are waypoints. Returns None when there is nothing to route.
    """
    if not activities:
        return None

    stops = [format_location(activity, destination) for activity in activities]
    params = {
        "api": "1",
        "origin": stops[0],
        "destination": stops[-1],
        "waypoints": "|".join(stops[1:-1]),
        "travelmode": travel_mode,
    }
    return f"{DIRECTIONS_BASE_URL}?{urlencode(params)}"


def build_place_url(activity: Activity, travel_mode: TravelMode = "driving") -> str | None:
    """Directions URL to a single geolocated activity, None without coordinates."""
    if activity.coordinates is None:
        return None
    params = {
        "api": "1",
        "destination": f"{activity.coordinates.lat},{activity.coordinates.lng}",
        "travelmode": travel_mode,
    }
    return f"{DIRECTIONS_BASE_URL}?{urlencode(params)}"

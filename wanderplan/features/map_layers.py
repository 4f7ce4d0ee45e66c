"""Map overlay data: per-day colours, markers and route lines."""

from dataclasses import dataclass, field

from wanderplan.features.maps import TravelMode, build_place_url
from wanderplan.models.itinerary import Activity, TripItinerary

DAY_COLORS = ["#10B981", "#3B82F6", "#F59E0B", "#6366F1", "#EC4899", "#8B5CF6"]


@dataclass(frozen=True)
class RouteStyle:
    weight: int
    dash_array: str | None


ROUTE_STYLES: dict[TravelMode, RouteStyle] = {
    "driving": RouteStyle(weight=4, dash_array=None),
    "walking": RouteStyle(weight=3, dash_array="5, 10"),
    "transit": RouteStyle(weight=3, dash_array="10, 10"),
}


@dataclass(frozen=True)
class MapMarker:
    """One geolocated activity on the map."""

    marker_id: str
    lat: float
    lng: float
    order: int
    activity: Activity
    directions_url: str | None


@dataclass
class DayLayer:
    """Markers and route line for a single day."""

    day_number: int
    title: str
    color: str
    markers: list[MapMarker] = field(default_factory=list)

    @property
    def route_points(self) -> list[tuple[float, float]]:
        return [(m.lat, m.lng) for m in self.markers]


def day_color(day_index: int) -> str:
    """Palette colour for the day at ``day_index`` (0-based, cycles)."""
    return DAY_COLORS[day_index % len(DAY_COLORS)]


def route_style(travel_mode: TravelMode) -> RouteStyle:
    return ROUTE_STYLES[travel_mode]


def build_map_layers(
    itinerary: TripItinerary,
    active_day: int | None = None,
    travel_mode: TravelMode = "driving",
) -> list[DayLayer]:
    """Build one layer per visible day.

    ``active_day`` of None or 0 shows every day. Colours follow the day's
    position in the itinerary so they stay stable when filtering. Activities
    without coordinates are left off the map.
    """
    layers: list[DayLayer] = []
    for index, day in enumerate(itinerary.days):
        if active_day and day.day_number != active_day:
            continue

        layer = DayLayer(day_number=day.day_number, title=day.title, color=day_color(index))
        for act_index, activity in enumerate(day.activities):
            if activity.coordinates is None:
                continue
            layer.markers.append(
                MapMarker(
                    marker_id=f"{day.day_number}-{act_index}",
                    lat=activity.coordinates.lat,
                    lng=activity.coordinates.lng,
                    order=act_index + 1,
                    activity=activity,
                    directions_url=build_place_url(activity, travel_mode),
                )
            )
        layers.append(layer)
    return layers


def map_bounds(layers: list[DayLayer]) -> list[tuple[float, float]] | None:
    """South-west and north-east corners covering every marker, or None."""
    points = [point for layer in layers for point in layer.route_points]
    if not points:
        return None
    lats = [lat for lat, _ in points]
    lngs = [lng for _, lng in points]
    return [(min(lats), min(lngs)), (max(lats), max(lngs))]

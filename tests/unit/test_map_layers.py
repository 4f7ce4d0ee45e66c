"""Tests for map overlay layers."""

from wanderplan.features.map_layers import (
    DAY_COLORS,
    build_map_layers,
    day_color,
    map_bounds,
    route_style,
)
from wanderplan.models.itinerary import TripItinerary


def test_one_layer_per_day(kyoto_itinerary: TripItinerary) -> None:
    layers = build_map_layers(kyoto_itinerary)

    assert [layer.day_number for layer in layers] == [1, 2, 3]
    assert [layer.color for layer in layers] == DAY_COLORS[:3]


def test_only_geolocated_activities_get_markers(kyoto_itinerary: TripItinerary) -> None:
    day_one = build_map_layers(kyoto_itinerary)[0]

    assert [m.marker_id for m in day_one.markers] == ["1-0", "1-1"]
    assert [m.order for m in day_one.markers] == [1, 2]
    assert day_one.route_points == [(34.9671, 135.7727), (35.005, 135.7649)]


def test_active_day_filter_keeps_colour(kyoto_itinerary: TripItinerary) -> None:
    layers = build_map_layers(kyoto_itinerary, active_day=2)

    assert len(layers) == 1
    assert layers[0].day_number == 2
    assert layers[0].color == DAY_COLORS[1]


def test_active_day_zero_shows_all(kyoto_itinerary: TripItinerary) -> None:
    assert len(build_map_layers(kyoto_itinerary, active_day=0)) == 3


def test_markers_carry_directions(kyoto_itinerary: TripItinerary) -> None:
    marker = build_map_layers(kyoto_itinerary, travel_mode="walking")[1].markers[0]
    assert marker.directions_url is not None
    assert "travelmode=walking" in marker.directions_url


def test_day_colour_cycles() -> None:
    assert day_color(len(DAY_COLORS)) == DAY_COLORS[0]


def test_route_styles() -> None:
    assert route_style("driving").dash_array is None
    assert route_style("walking").dash_array == "5, 10"
    assert route_style("transit").weight == 3


def test_map_bounds(kyoto_itinerary: TripItinerary) -> None:
    bounds = map_bounds(build_map_layers(kyoto_itinerary))
    assert bounds == [(34.9671, 135.6713), (35.0394, 135.7727)]


def test_map_bounds_without_markers() -> None:
    assert map_bounds([]) is None

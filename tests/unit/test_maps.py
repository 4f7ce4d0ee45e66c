"""Tests for Google Maps deep links."""

from urllib.parse import parse_qs, urlparse

from wanderplan.features.maps import build_place_url, build_route_url, format_location
from wanderplan.models.itinerary import TripItinerary


def _query(url: str) -> dict[str, list[str]]:
    return parse_qs(urlparse(url).query, keep_blank_values=True)


def test_format_location_prefers_coordinates(kyoto_itinerary: TripItinerary) -> None:
    activity = kyoto_itinerary.days[0].activities[0]
    assert format_location(activity, "Kyoto, Japan") == "34.9671,135.7727"


def test_format_location_falls_back_to_name(kyoto_itinerary: TripItinerary) -> None:
    activity = kyoto_itinerary.days[0].activities[2]
    assert format_location(activity, "Kyoto, Japan") == "Gion Evening Stroll, Kyoto, Japan"


def test_route_url_origin_waypoints_destination(kyoto_itinerary: TripItinerary) -> None:
    url = build_route_url(kyoto_itinerary.days[0].activities, kyoto_itinerary.destination)

    assert url is not None
    assert url.startswith("https://www.google.com/maps/dir/?api=1")
    query = _query(url)
    assert query["origin"] == ["34.9671,135.7727"]
    assert query["waypoints"] == ["35.005,135.7649"]
    assert query["destination"] == ["Gion Evening Stroll, Kyoto, Japan"]
    assert query["travelmode"] == ["driving"]


def test_route_url_single_activity(kyoto_itinerary: TripItinerary) -> None:
    url = build_route_url(kyoto_itinerary.days[2].activities, "Kyoto", travel_mode="walking")

    assert url is not None
    query = _query(url)
    assert query["origin"] == query["destination"] == ["35.017,135.6713"]
    assert query["waypoints"] == [""]
    assert query["travelmode"] == ["walking"]


def test_route_url_empty_day() -> None:
    assert build_route_url([], "Kyoto") is None


def test_place_url(kyoto_itinerary: TripItinerary) -> None:
    url = build_place_url(kyoto_itinerary.days[1].activities[0], travel_mode="transit")

    assert url is not None
    query = _query(url)
    assert query["destination"] == ["35.0394,135.7292"]
    assert query["travelmode"] == ["transit"]


def test_place_url_needs_coordinates(kyoto_itinerary: TripItinerary) -> None:
    assert build_place_url(kyoto_itinerary.days[1].activities[1]) is None

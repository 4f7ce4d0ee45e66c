"""Folium rendering of the itinerary map overlay."""

import html

import folium
from folium.plugins import MarkerCluster

from wanderplan.features.map_layers import MapMarker, build_map_layers, map_bounds, route_style
from wanderplan.features.maps import TravelMode
from wanderplan.models.itinerary import TripItinerary

TILES = "CartoDB positron"


def _popup_html(marker: MapMarker, color: str) -> str:
    activity = marker.activity
    parts = [
        f"<b>{html.escape(activity.name)}</b>",
        f"<div style='color:{color};font-size:11px'>{html.escape(activity.time_slot)}</div>",
        f"<div style='font-size:12px'>{html.escape(activity.description)}</div>",
    ]
    if marker.directions_url:
        parts.append(
            f"<a href='{html.escape(marker.directions_url)}' target='_blank'>Get directions</a>"
        )
    return "".join(parts)


def build_folium_map(
    itinerary: TripItinerary,
    active_day: int | None = None,
    travel_mode: TravelMode = "driving",
) -> folium.Map:
    """Clustered numbered markers plus one route line per visible day."""
    layers = build_map_layers(itinerary, active_day=active_day, travel_mode=travel_mode)
    style = route_style(travel_mode)

    m = folium.Map(location=[0, 0], zoom_start=2, tiles=TILES)
    cluster = MarkerCluster(name="Activities").add_to(m)

    for layer in layers:
        for marker in layer.markers:
            icon = folium.DivIcon(
                html=(
                    f"<div style='background:{layer.color};color:white;border-radius:50%;"
                    f"width:24px;height:24px;text-align:center;line-height:24px;"
                    f"font-weight:bold;border:2px solid white'>{marker.order}</div>"
                )
            )
            folium.Marker(
                location=[marker.lat, marker.lng],
                icon=icon,
                tooltip=f"Day {layer.day_number}: {marker.activity.name}",
                popup=folium.Popup(_popup_html(marker, layer.color), max_width=220),
            ).add_to(cluster)

        if len(layer.route_points) > 1:
            folium.PolyLine(
                layer.route_points,
                color=layer.color,
                weight=style.weight,
                opacity=0.8,
                dash_array=style.dash_array,
                tooltip=f"Day {layer.day_number}: {layer.title}",
            ).add_to(m)

    bounds = map_bounds(layers)
    if bounds:
        m.fit_bounds(bounds, padding=(50, 50))
    return m

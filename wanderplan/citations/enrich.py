"""Map-link enrichment from grounding citations.

Cross-references the place titles cited by the generation service with activity
names and attaches the cited URI as the activity's map link.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from wanderplan.models.itinerary import Activity, TripItinerary


def citation_place(record: Mapping[str, Any]) -> tuple[str | None, str | None]:
    """Return (title, uri) of a citation record.

    Accepts flat records ({"title", "uri"}) and grounding chunks that nest the
    place under a "maps" key.
    """
    source = record.get("maps")
    if not isinstance(source, Mapping):
        source = record

    title = source.get("title")
    uri = source.get("uri")
    return (
        title if isinstance(title, str) and title else None,
        uri if isinstance(uri, str) and uri else None,
    )


def titles_match(activity_name: str, title: str) -> bool:
    """Case-insensitive check that the cited title appears in the activity name."""
    name = activity_name.strip().lower()
    place = title.strip().lower()
    if not name or not place:
        return False
    return place in name


def find_map_link(activity_name: str, citations: Sequence[Mapping[str, Any]]) -> str | None:
    """Find the map link for an activity.

    The first citation (in list order) whose title matches wins, even if it
    carries no URI.
    """
    for record in citations:
        title, uri = citation_place(record)
        if title and titles_match(activity_name, title):
            return uri
    return None


def attach_map_links(
    itinerary: TripItinerary, citations: Sequence[Mapping[str, Any]]
) -> TripItinerary:
    """Return a copy of the itinerary with map links resolved from citations.

    Activities without a matching citation keep an unset link.
    """
    if not citations:
        return itinerary

    days = []
    for day in itinerary.days:
        activities: list[Activity] = []
        for activity in day.activities:
            link = find_map_link(activity.name, citations)
            if link:
                activity = activity.model_copy(update={"map_link": link})
            activities.append(activity)
        days.append(day.model_copy(update={"activities": activities}))

    return itinerary.model_copy(update={"days": days})


def count_map_links(itinerary: TripItinerary) -> int:
    """Number of activities carrying a map link."""
    return sum(1 for _, _, activity in itinerary.iter_activities() if activity.map_link)

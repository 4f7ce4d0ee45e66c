"""Tests for grounding map-link enrichment."""

from wanderplan.citations.enrich import (
    attach_map_links,
    citation_place,
    count_map_links,
    find_map_link,
    titles_match,
)
from wanderplan.models.itinerary import TripItinerary


def test_title_contained_in_activity_name() -> None:
    """Test the canonical example: cited place inside a longer activity name."""
    citations = [{"title": "Tokyo Tower", "uri": "U1"}]
    assert find_map_link("Visit Tokyo Tower Observatory", citations) == "U1"


def test_match_is_case_insensitive() -> None:
    citations = [{"title": "tokyo tower", "uri": "U1"}]
    assert find_map_link("TOKYO TOWER at night", citations) == "U1"


def test_activity_name_contained_in_title_does_not_match() -> None:
    citations = [{"title": "Nishiki Market, Nakagyo Ward", "uri": "U2"}]
    assert find_map_link("Nishiki Market", citations) is None


def test_short_activity_name_does_not_pick_up_longer_place() -> None:
    citations = [{"maps": {"title": "Mori Art Museum", "uri": "U_MORI"}}]
    assert find_map_link("Art", citations) is None


def test_longer_title_does_not_shadow_contained_title() -> None:
    """Test that a longer title holding the activity name is skipped for the real match."""
    citations = [
        {"maps": {"title": "Senso-ji Temple Grounds Tea House", "uri": "U_TEA_HOUSE"}},
        {"maps": {"title": "Senso-ji", "uri": "U_SENSOJI"}},
    ]
    assert find_map_link("Senso-ji Temple", citations) == "U_SENSOJI"


def test_no_match_leaves_link_unset() -> None:
    citations = [{"title": "Osaka Castle", "uri": "U3"}]
    assert find_map_link("Visit Tokyo Tower Observatory", citations) is None


def test_first_match_wins() -> None:
    citations = [
        {"title": "Tokyo Tower", "uri": "FIRST"},
        {"title": "Tower", "uri": "SECOND"},
    ]
    assert find_map_link("Visit Tokyo Tower", citations) == "FIRST"


def test_first_match_without_uri_yields_no_link() -> None:
    citations = [{"title": "Tokyo Tower"}, {"title": "Tokyo Tower", "uri": "U1"}]
    assert find_map_link("Visit Tokyo Tower", citations) is None


def test_citations_without_title_are_skipped() -> None:
    citations = [{"uri": "NO_TITLE"}, {"title": "", "uri": "EMPTY"}, {"title": "Tower", "uri": "U1"}]
    assert find_map_link("Tokyo Tower", citations) == "U1"


def test_grounding_chunk_shape_supported() -> None:
    """Test Gemini grounding chunks nesting the place under 'maps'."""
    chunk = {"maps": {"title": "Kinkaku-ji", "uri": "https://maps.google.com/?cid=1"}}
    assert citation_place(chunk) == ("Kinkaku-ji", "https://maps.google.com/?cid=1")
    assert find_map_link("Kinkaku-ji Temple", [chunk]) == "https://maps.google.com/?cid=1"


def test_web_only_chunk_has_no_place() -> None:
    assert citation_place({"web": {"title": "Blog", "uri": "https://blog"}}) == (None, None)


def test_empty_strings_never_match() -> None:
    assert titles_match("", "Tokyo Tower") is False
    assert titles_match("Tokyo Tower", "  ") is False


def test_attach_map_links_enriches_matching_activities(kyoto_itinerary: TripItinerary) -> None:
    citations = [
        {"maps": {"title": "Fushimi Inari Shrine", "uri": "U-INARI"}},
        {"maps": {"title": "Kinkaku-ji", "uri": "U-KINKAKU"}},
    ]

    enriched = attach_map_links(kyoto_itinerary, citations)

    assert enriched.days[0].activities[0].map_link == "U-INARI"
    assert enriched.days[1].activities[0].map_link == "U-KINKAKU"
    assert enriched.days[0].activities[1].map_link is None
    assert count_map_links(enriched) == 2
    # Input left untouched
    assert count_map_links(kyoto_itinerary) == 0


def test_attach_map_links_without_citations_is_identity(kyoto_itinerary: TripItinerary) -> None:
    assert attach_map_links(kyoto_itinerary, []) is kyoto_itinerary


def test_attach_map_links_is_deterministic(kyoto_itinerary: TripItinerary) -> None:
    citations = [{"title": "Market", "uri": "U-M"}, {"title": "Temple", "uri": "U-T"}]
    first = attach_map_links(kyoto_itinerary, citations)
    second = attach_map_links(kyoto_itinerary, citations)
    assert first == second

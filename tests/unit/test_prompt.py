"""Tests for prompt construction."""

from wanderplan.models.preferences import TripPreferences
from wanderplan.pipeline.prompt import build_prompt


def test_prompt_substitutes_preferences(kyoto_prefs: TripPreferences) -> None:
    """Test every preference appears in the prompt."""
    prompt = build_prompt(kyoto_prefs)

    assert "Create a 3-day travel itinerary for Kyoto." in prompt
    assert "Travelers: 2." in prompt
    assert "Budget: Moderate." in prompt
    assert "Interests: Food." in prompt


def test_prompt_joins_interests() -> None:
    prefs = TripPreferences(destination="Rome", interests=["History", "Art", "Food"])
    assert "Interests: History, Art, Food." in build_prompt(prefs)


def test_prompt_is_deterministic(kyoto_prefs: TripPreferences) -> None:
    """Test identical preferences give identical prompts."""
    same = TripPreferences(**kyoto_prefs.model_dump())
    assert build_prompt(kyoto_prefs) == build_prompt(same)


def test_prompt_differs_when_preferences_differ(kyoto_prefs: TripPreferences) -> None:
    other = kyoto_prefs.with_changes(duration=4)
    assert build_prompt(kyoto_prefs) != build_prompt(other)


def test_prompt_mandates_json_and_maps_grounding(kyoto_prefs: TripPreferences) -> None:
    prompt = build_prompt(kyoto_prefs)

    assert "Output purely VALID JSON" in prompt
    assert '"dayNumber"' in prompt
    assert '"costEstimate"' in prompt
    assert "Google Maps tool" in prompt
    # Map links are never requested from the model
    assert "googleMapLink" not in prompt

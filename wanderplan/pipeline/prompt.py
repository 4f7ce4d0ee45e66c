"""Prompt construction for itinerary generation."""

from wanderplan.models.preferences import TripPreferences

ITINERARY_SCHEMA = """{
  "destination": "City, Country",
  "summary": "Brief 1-sentence hook.",
  "currency": "Code",
  "totalEstimatedCost": number,
  "detailedReport": {
    "logistics": "Transport & safety advice.",
    "packingTips": "What to pack.",
    "whyThisFits": "Why this matches user interests.",
    "localEtiquette": "Cultural do's/don'ts."
  },
  "days": [
    {
      "dayNumber": 1,
      "title": "Day Theme",
      "activities": [
        {
          "name": "Place Name",
          "description": "Concise 15-word max description.",
          "timeSlot": "Morning" | "Afternoon" | "Evening",
          "duration": "e.g. 2h",
          "location": "Address",
          "coordinates": { "lat": number, "lng": number },
          "costEstimate": number,
          "category": "Food" | "Sightseeing" | "Activity" | "Relaxation"
        }
      ]
    }
  ]
}"""

CONSTRAINTS = [
    "Use Google Maps tool to verify real locations and get coordinates (lat/lng) for accurate mapping.",
    "Group activities by proximity to minimize travel.",
    "Keep descriptions short to improve generation speed.",
    "Ensure coordinates are provided for at least 90% of locations.",
]


def build_prompt(prefs: TripPreferences) -> str:
    """Build the generation prompt from trip preferences.

    Pure function: identical preferences always yield an identical prompt.
    """
    lines = [
        f"Create a {prefs.duration}-day travel itinerary for {prefs.destination.strip()}.",
        f"Travelers: {prefs.travelers}. Budget: {prefs.budget}. "
        f"Interests: {', '.join(prefs.interests)}.",
        "",
        "Output purely VALID JSON. No conversational filler.",
        "",
        "Structure:",
        ITINERARY_SCHEMA,
        "",
        "Constraints:",
    ]
    lines.extend(f"{i}. {rule}" for i, rule in enumerate(CONSTRAINTS, start=1))
    return "\n".join(lines)

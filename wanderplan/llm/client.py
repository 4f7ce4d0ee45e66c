"""LLM client for itinerary generation with Google Gemini integration.

Security: Reads API key from settings only, never hardcoded.
A deterministic stub is available for local development and tests; it is only
used when explicitly enabled, never as a silent fallback.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Protocol

from google import genai
from google.genai import types

from wanderplan.config import Settings, get_settings

logger = logging.getLogger(__name__)


class MissingAPIKeyError(Exception):
    """No API key configured for the generation service."""

    pass


@dataclass
class GenerationResult:
    """Raw output of one generation call."""

    text: str
    # Grounding chunks as plain dicts, verbatim from the service
    citations: list[dict[str, Any]] = field(default_factory=list)


class GenerationClient(Protocol):
    """Protocol for generation client implementations."""

    async def generate(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float,
        enable_maps_tool: bool = True,
    ) -> GenerationResult:
        """Send a prompt and return free text plus any citation records.

        Args:
            prompt: Full instruction text
            model: Model identifier
            temperature: Sampling temperature
            enable_maps_tool: Whether the location-lookup tool is available

        Returns:
            GenerationResult with response text and grounding chunks
        """
        ...


def extract_grounding_chunks(response: Any) -> list[dict[str, Any]]:
    """Pull grounding chunks off the first candidate as plain dicts."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []

    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    records: list[dict[str, Any]] = []
    for chunk in chunks:
        if isinstance(chunk, dict):
            records.append(chunk)
        else:
            records.append(chunk.model_dump(mode="json", exclude_none=True))
    return records


class GeminiClient:
    """Gemini-backed client with Google Maps grounding."""

    def __init__(self, api_key: str, timeout_ms: int | None = None):
        """Initialize Gemini client.

        Args:
            api_key: Gemini API key (read from settings, may be empty)
            timeout_ms: Optional transport timeout; None keeps the SDK default
        """
        self.api_key = api_key
        self.timeout_ms = timeout_ms
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        # Created on the first call; a missing key raises there
        if self._client is None:
            if not self.api_key:
                raise MissingAPIKeyError("WANDERPLAN_GEMINI_API_KEY is not configured")
            http_options = types.HttpOptions(timeout=self.timeout_ms) if self.timeout_ms else None
            self._client = genai.Client(api_key=self.api_key, http_options=http_options)
        return self._client

    async def generate(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float,
        enable_maps_tool: bool = True,
    ) -> GenerationResult:
        """Generate content using the Gemini API."""
        client = self._get_client()

        tools = [types.Tool(google_maps=types.GoogleMaps())] if enable_maps_tool else None
        config = types.GenerateContentConfig(temperature=temperature, tools=tools)

        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )

        text = response.text or ""
        citations = extract_grounding_chunks(response)
        logger.debug(f"Gemini returned {len(text)} chars, {len(citations)} grounding chunks")
        return GenerationResult(text=text, citations=citations)


_PROMPT_HEADER = re.compile(r"Create a (\d+)-day travel itinerary for (.+?)\.\s*$", re.MULTILINE)

_STUB_SLOTS = [
    ("Morning", "Sightseeing", "Old Town Walk", 0.0),
    ("Afternoon", "Food", "Central Market Lunch", 15.0),
    ("Evening", "Relaxation", "Riverside Promenade", 0.0),
]


class DeterministicStubClient:
    """Deterministic stub client for development and tests (no API key required)."""

    async def generate(
        self,
        prompt: str,
        *,
        model: str,
        temperature: float,
        enable_maps_tool: bool = True,
    ) -> GenerationResult:
        """Generate a fenced JSON itinerary shaped by the prompt header."""
        match = _PROMPT_HEADER.search(prompt)
        days = int(match.group(1)) if match else 1
        destination = match.group(2).strip() if match else "Sample City"

        day_plans = []
        for day_number in range(1, days + 1):
            activities = []
            for slot, category, name, cost in _STUB_SLOTS:
                activities.append(
                    {
                        "name": f"{destination} {name}",
                        "description": f"{name} (stub).",
                        "timeSlot": slot,
                        "duration": "2h",
                        "location": destination,
                        "costEstimate": cost,
                        "category": category,
                    }
                )
            day_plans.append(
                {"dayNumber": day_number, "title": f"Day {day_number} highlights", "activities": activities}
            )

        payload = {
            "destination": destination,
            "summary": f"A placeholder {days}-day trip to {destination}.",
            "currency": "USD",
            "totalEstimatedCost": sum(cost for *_, cost in _STUB_SLOTS) * days,
            "detailedReport": {
                "logistics": "Stub logistics.",
                "packingTips": "Stub packing tips.",
                "whyThisFits": "Stub rationale.",
                "localEtiquette": "Stub etiquette.",
            },
            "days": day_plans,
        }

        citations: list[dict[str, Any]] = []
        if enable_maps_tool:
            citations.append(
                {"maps": {"title": f"{destination} Central Market", "uri": "https://maps.google.com/?cid=0"}}
            )

        text = "```json\n" + json.dumps(payload, indent=2) + "\n```"
        return GenerationResult(text=text, citations=citations)


def get_llm_client(settings: Settings | None = None) -> GenerationClient:
    """Factory function to get the generation client based on config.

    Returns:
        DeterministicStubClient if explicitly enabled, GeminiClient otherwise.
        A missing API key surfaces when the Gemini client is called.
    """
    settings = settings or get_settings()

    if settings.use_stub_llm:
        logger.warning("Stub LLM enabled, itineraries will be placeholders")
        return DeterministicStubClient()

    api_key = settings.gemini_api_key.get_secret_value() if settings.gemini_api_key else ""
    if not api_key:
        logger.warning("No Gemini API key configured, generation calls will fail")
    return GeminiClient(api_key=api_key, timeout_ms=settings.gemini_timeout_ms)

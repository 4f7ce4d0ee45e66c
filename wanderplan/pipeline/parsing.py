"""Response sanitization and schema validation."""

import logging

from pydantic import ValidationError

from wanderplan.models.itinerary import TripItinerary
from wanderplan.pipeline.errors import GenerationError, GenerationErrorKind

logger = logging.getLogger(__name__)

# Logged previews of bad responses are capped
_PREVIEW_CHARS = 500


def strip_code_fences(text: str) -> str:
    """Remove Markdown code-fence markers and surrounding whitespace.

    Idempotent: a clean string comes back unchanged (modulo outer whitespace).
    """
    return text.replace("```json", "").replace("```", "").strip()


def parse_itinerary(raw_text: str) -> TripItinerary:
    """Parse generated text into a validated TripItinerary.

    Any map link the model volunteered is discarded; links come from grounding only.

    Raises:
        GenerationError: INVALID_FORMAT if the text is not JSON or does not match
            the itinerary shape
    """
    cleaned = strip_code_fences(raw_text or "")

    try:
        itinerary = TripItinerary.model_validate_json(cleaned or "{}")
    except ValidationError as e:
        logger.error(
            f"Failed to parse itinerary from response ({e.error_count()} errors): "
            f"{cleaned[:_PREVIEW_CHARS]!r}"
        )
        raise GenerationError(
            "AI generated an invalid format. Please try again.",
            GenerationErrorKind.INVALID_FORMAT,
        ) from e

    days = [
        day.model_copy(
            update={"activities": [a.model_copy(update={"map_link": None}) for a in day.activities]}
        )
        for day in itinerary.days
    ]
    return itinerary.model_copy(update={"days": days, "grounding_metadata": None})

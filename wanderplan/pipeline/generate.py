"""Itinerary request pipeline: prompt, one generation call, parse, enrich."""

import logging
import time

from wanderplan.citations.enrich import attach_map_links, count_map_links
from wanderplan.config import Settings, get_settings
from wanderplan.llm.client import GenerationClient, GenerationResult, get_llm_client
from wanderplan.models.itinerary import TripItinerary
from wanderplan.models.preferences import TripPreferences
from wanderplan.pipeline.errors import GenerationError, GenerationErrorKind
from wanderplan.pipeline.parsing import parse_itinerary
from wanderplan.pipeline.prompt import build_prompt
from wanderplan.utils.logging import StructuredGenerationLogger
from wanderplan.utils.metrics import PrometheusGenerationMetrics

logger = logging.getLogger(__name__)

_structured_logger = StructuredGenerationLogger()
_metrics = PrometheusGenerationMetrics()


async def generate_itinerary(
    prefs: TripPreferences,
    client: GenerationClient | None = None,
    settings: Settings | None = None,
) -> TripItinerary:
    """Generate an itinerary for the given preferences.

    Stateless: no caching and no retries, every call queries the service once.

    Args:
        prefs: Trip preferences collected by the wizard
        client: Generation client (defaults to the configured one)
        settings: Settings override (defaults to cached settings)

    Returns:
        Validated TripItinerary with map links and raw grounding metadata

    Raises:
        GenerationError: SERVICE_FAILURE if the call fails, INVALID_FORMAT if the
            response cannot be parsed into an itinerary
    """
    settings = settings or get_settings()
    client = client or get_llm_client(settings)
    model = settings.gemini_model

    prompt = build_prompt(prefs)
    logger.info(
        f"Generating {prefs.duration}-day itinerary for {prefs.destination!r} "
        f"({prefs.travelers} travelers, {prefs.budget})"
    )

    started = time.perf_counter()
    try:
        result: GenerationResult = await client.generate(
            prompt,
            model=model,
            temperature=settings.gemini_temperature,
            enable_maps_tool=True,
        )
        itinerary = parse_itinerary(result.text)
    except GenerationError as e:
        _record_failure(model, started, e.kind)
        raise
    except Exception as e:
        logger.error(f"Gemini API call failed: {type(e).__name__}: {e}")
        _record_failure(model, started, GenerationErrorKind.SERVICE_FAILURE)
        raise GenerationError(
            f"Generation service call failed: {type(e).__name__}",
            GenerationErrorKind.SERVICE_FAILURE,
        ) from e

    itinerary = attach_map_links(itinerary, result.citations)
    itinerary = itinerary.model_copy(update={"grounding_metadata": list(result.citations)})

    latency_ms = (time.perf_counter() - started) * 1000
    map_links = count_map_links(itinerary)
    _metrics.record_latency("success", latency_ms)
    _metrics.inc_map_links(map_links)
    _structured_logger.log_attempt(
        model=model,
        outcome="success",
        latency_ms=latency_ms,
        days=len(itinerary.days),
        citations=len(result.citations),
        map_links=map_links,
    )
    return itinerary


def _record_failure(model: str, started: float, kind: GenerationErrorKind) -> None:
    latency_ms = (time.perf_counter() - started) * 1000
    _metrics.record_latency("error", latency_ms)
    _metrics.inc_error(kind.value)
    _structured_logger.log_attempt(
        model=model, outcome="error", latency_ms=latency_ms, error_kind=kind.value
    )

"""Drives the pipeline from a loading view state."""

import logging
from collections.abc import Awaitable, Callable

from wanderplan.models.itinerary import TripItinerary
from wanderplan.models.preferences import TripPreferences
from wanderplan.orchestration.state import (
    GenerationFailed,
    GenerationSucceeded,
    View,
    ViewState,
    reduce,
)
from wanderplan.pipeline.errors import GENERIC_FAILURE_MESSAGE, GenerationError
from wanderplan.pipeline.generate import generate_itinerary

logger = logging.getLogger(__name__)

Generator = Callable[[TripPreferences], Awaitable[TripItinerary]]


async def run_generation(state: ViewState, generate: Generator = generate_itinerary) -> ViewState:
    """Run one generation for a loading state and reduce its outcome.

    This is the only place pipeline failures are caught. The error kind is
    logged; the user only ever sees the generic message.

    Args:
        state: State in the loading view
        generate: Coroutine function producing an itinerary from preferences

    Returns:
        The itinerary view on success, the error view on any failure, or
        ``state`` unchanged if it is not loading
    """
    if state.view != View.LOADING:
        logger.warning(f"run_generation called in {state.view.value!r} view, ignoring")
        return state

    request_id = state.request_id
    try:
        itinerary = await generate(state.preferences)
    except GenerationError as e:
        logger.error(f"Itinerary generation failed ({e.kind.value}): {e}")
        return reduce(state, GenerationFailed(request_id, GENERIC_FAILURE_MESSAGE))
    except Exception as e:
        logger.exception(f"Unexpected failure during itinerary generation: {e}")
        return reduce(state, GenerationFailed(request_id, GENERIC_FAILURE_MESSAGE))

    return reduce(state, GenerationSucceeded(request_id, itinerary))

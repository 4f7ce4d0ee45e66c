"""Itinerary request pipeline - re-exports for convenience."""

from wanderplan.pipeline.errors import GENERIC_FAILURE_MESSAGE, GenerationError, GenerationErrorKind
from wanderplan.pipeline.generate import generate_itinerary
from wanderplan.pipeline.parsing import parse_itinerary, strip_code_fences
from wanderplan.pipeline.prompt import build_prompt

__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "GenerationError",
    "GenerationErrorKind",
    "build_prompt",
    "generate_itinerary",
    "parse_itinerary",
    "strip_code_fences",
]

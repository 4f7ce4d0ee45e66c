"""Error taxonomy for itinerary generation."""

from enum import Enum

GENERIC_FAILURE_MESSAGE = "Failed to generate itinerary. Please try again later."


class GenerationErrorKind(str, Enum):
    """Why a generation attempt failed."""

    INVALID_FORMAT = "invalid_format"
    SERVICE_FAILURE = "service_failure"


class GenerationError(Exception):
    """Itinerary generation failed and will not be retried."""

    def __init__(self, message: str, kind: GenerationErrorKind):
        super().__init__(message)
        self.kind = kind

    def __str__(self) -> str:
        return f"[{self.kind.value}] {super().__str__()}"

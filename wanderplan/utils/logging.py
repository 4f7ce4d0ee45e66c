"""Structured logging for itinerary generation."""

import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(level.upper())


class StructuredGenerationLogger:
    """Structured logger for generation attempts."""

    def log_attempt(
        self,
        model: str,
        outcome: str,
        latency_ms: float,
        days: int = 0,
        citations: int = 0,
        map_links: int = 0,
        error_kind: str | None = None,
    ) -> None:
        """Log one generation attempt with structured data."""
        log_data: dict[str, Any] = {
            "model": model,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "days": days,
            "citations": citations,
            "map_links": map_links,
        }

        if error_kind:
            log_data["error_kind"] = error_kind

        log_msg = f"Itinerary generation: {model} - {outcome}"

        if outcome == "success":
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})

"""FastAPI application."""

from fastapi import FastAPI

from wanderplan.api.routes.health import router as health_router
from wanderplan.api.routes.itineraries import router as itineraries_router
from wanderplan.api.routes.metrics import router as metrics_router
from wanderplan.config import get_settings
from wanderplan.utils.logging import configure_logging

configure_logging(get_settings().log_level)

app = FastAPI(title="WanderPlan API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(itineraries_router, tags=["itineraries"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "WanderPlan API", "version": "0.1.0"}

"""Health check endpoint."""

from fastapi import APIRouter

from wanderplan.config import get_settings

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Reports which generation client is configured without calling it.
    """
    settings = get_settings()
    if settings.use_stub_llm:
        llm = "stub"
    elif settings.gemini_api_key and settings.gemini_api_key.get_secret_value():
        llm = "gemini"
    else:
        llm = "not_configured"
    return {"status": "ok", "llm": llm, "model": settings.gemini_model}

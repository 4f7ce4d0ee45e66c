"""Global pytest configuration."""

import os

# Never reach the real generation service from tests
os.environ.setdefault("WANDERPLAN_USE_STUB_LLM", "true")
os.environ.setdefault("WANDERPLAN_GEMINI_API_KEY", "")

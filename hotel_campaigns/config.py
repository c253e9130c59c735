"""
Runtime configuration loaded from the environment (.env supported)
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Completion service
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
GROQ_MODEL = os.getenv("GROQ_MODEL", "openai/gpt-oss-120b")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))
COMPLETION_TIMEOUT_SECONDS = float(os.getenv("COMPLETION_TIMEOUT_SECONDS", "60"))

# Market research (Tavily)
SEARCH_MAX_RESULTS = int(os.getenv("SEARCH_MAX_RESULTS", "3"))
SEARCH_TIMEOUT_SECONDS = float(os.getenv("SEARCH_TIMEOUT_SECONDS", "15"))

# HTTP layer
PORT = int(os.getenv("PORT", "3001"))
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:3000")

# Fallback daily budget when the model answer has no number in it
DEFAULT_DAILY_BUDGET = 500.0


def is_development() -> bool:
    """True when APP_ENV=development; internal error details are shown to callers only then"""
    return os.getenv("APP_ENV", "production").lower() == "development"

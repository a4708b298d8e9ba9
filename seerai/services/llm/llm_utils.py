# seerai/services/llm/llm_utils.py
from google import genai

from seerai.core.config import Settings

JSON_MIME_TYPE = "application/json"


def build_llm_client(settings: Settings) -> genai.Client:
    """Create the provider client once per process."""
    if settings.LLM_CLIENT == "vertex":
        return genai.Client(vertexai=True, project=settings.GOOGLE_PROJECT_ID, location=settings.GOOGLE_REGION)
    return genai.Client(api_key=settings.GEMINI_API_KEY)

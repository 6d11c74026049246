"""Google Gemini API wrapper with error handling."""

import logging

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


async def generate_text(
    prompt: str,
    model: str | None = None,
    client: genai.Client | None = None,
) -> str | None:
    """Send a prompt to Gemini and return the raw response text.

    Returns None when Gemini is not configured or the call fails; the
    error is logged rather than raised.
    """
    client = client or get_client()
    if client is None:
        return None

    try:
        response = await client.aio.models.generate_content(
            model=model or settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                temperature=settings.gemini_temperature,
                max_output_tokens=settings.gemini_max_output_tokens,
            ),
        )
        return response.text or ""

    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None

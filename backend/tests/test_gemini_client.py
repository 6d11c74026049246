from unittest.mock import patch

import pytest

from config import settings
from services import gemini_client


class TestGenerateText:
    @pytest.mark.asyncio
    async def test_returns_response_text(self, make_gemini):
        client = make_gemini("[]")
        assert await gemini_client.generate_text("prompt", client=client) == "[]"

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == settings.gemini_model
        assert kwargs["contents"] == "prompt"

    @pytest.mark.asyncio
    async def test_model_override(self, make_gemini):
        client = make_gemini("ok")
        await gemini_client.generate_text("prompt", model="gemini-2.5-pro", client=client)
        assert client.aio.models.generate_content.call_args.kwargs["model"] == "gemini-2.5-pro"

    @pytest.mark.asyncio
    async def test_none_text_becomes_empty_string(self, make_gemini):
        assert await gemini_client.generate_text("prompt", client=make_gemini(None)) == ""

    @pytest.mark.asyncio
    async def test_api_error_returns_none(self, make_gemini):
        client = make_gemini(error=RuntimeError("503 UNAVAILABLE"))
        assert await gemini_client.generate_text("prompt", client=client) is None

    @pytest.mark.asyncio
    async def test_unconfigured_returns_none(self):
        with patch.object(gemini_client, "get_client", return_value=None):
            assert await gemini_client.generate_text("prompt") is None


def test_get_client_without_key():
    with patch.object(settings, "gemini_api_key", ""):
        assert gemini_client.get_client() is None

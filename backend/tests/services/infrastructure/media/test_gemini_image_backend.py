"""
Tests for reelsmith.services.infrastructure.media.gemini_image_backend
"""

from unittest.mock import MagicMock

import pytest

from reelsmith.services.infrastructure.media import GeminiImageBackend


def client_returning(images):
    client = MagicMock()
    client.models.generate_images.return_value = MagicMock(generated_images=images)
    return client


class TestGeminiImageBackend:

    @pytest.mark.asyncio
    async def test_returns_inline_bytes(self):
        image = MagicMock()
        image.image.image_bytes = b"png-bytes"
        image.image.mime_type = "image/png"
        client = client_returning([image])

        result = await GeminiImageBackend(client=client).generate(
            "a castle", "anime", "portrait_16_9", "imagen-4.0-generate-001"
        )

        assert result.success
        assert result.image_bytes == b"png-bytes"
        assert result.image_url is None
        kwargs = client.models.generate_images.call_args.kwargs
        assert kwargs["model"] == "imagen-4.0-generate-001"
        assert kwargs["prompt"] == "a castle, anime"
        assert kwargs["config"].aspect_ratio == "9:16"

    @pytest.mark.asyncio
    async def test_empty_response_is_unsuccessful(self):
        result = await GeminiImageBackend(client=client_returning([])).generate(
            "p", None, "portrait_16_9", "imagen-4.0-generate-001"
        )
        assert not result.success

    @pytest.mark.asyncio
    async def test_sdk_error_is_unsuccessful(self):
        client = MagicMock()
        client.models.generate_images.side_effect = RuntimeError("blocked by safety filter")

        result = await GeminiImageBackend(client=client).generate(
            "p", None, "portrait_16_9", "imagen-4.0-generate-001"
        )

        assert not result.success
        assert "safety" in result.error

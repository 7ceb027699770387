"""
Imagen backend through the Gemini API.
"""

import asyncio
from typing import Optional

from google import genai
from google.genai import types

from reelsmith.core import get_logger
from reelsmith.models import GeneratedImage

from ..llm.gemini_provider import create_gemini_client
from .base import ImageBackend

logger = get_logger(__name__, component="gemini_image_backend")

# fal.ai size names -> Imagen aspect ratios
ASPECT_RATIOS = {
    "portrait_16_9": "9:16",
    "portrait_4_3": "3:4",
    "square": "1:1",
    "square_hd": "1:1",
    "landscape_4_3": "4:3",
    "landscape_16_9": "16:9",
}


class GeminiImageBackend(ImageBackend):
    """Returns image bytes inline; there is no hosted URL to fall back to."""

    name = "gemini"

    def __init__(self, client: Optional[genai.Client] = None, api_key: Optional[str] = None):
        self.client = client or create_gemini_client(api_key)

    async def generate(
        self,
        prompt: str,
        style: Optional[str],
        image_size: str,
        model: str,
    ) -> GeneratedImage:
        if self.client is None:
            return GeneratedImage(success=False, error="Gemini API key not found")

        full_prompt = f"{prompt}, {style}" if style else prompt
        config = types.GenerateImagesConfig(
            number_of_images=1,
            aspect_ratio=ASPECT_RATIOS.get(image_size, "9:16"),
        )

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_images,
                model=model,
                prompt=full_prompt,
                config=config,
            )
        except Exception as e:
            logger.error(f"Imagen generation failed: {e}", extra={"model": model})
            return GeneratedImage(success=False, error=str(e))

        generated = response.generated_images or []
        if not generated or generated[0].image is None or not generated[0].image.image_bytes:
            return GeneratedImage(success=False, error="No image generated")

        image = generated[0].image
        return GeneratedImage(
            success=True,
            image_bytes=image.image_bytes,
            mime_type=image.mime_type or "image/png",
        )

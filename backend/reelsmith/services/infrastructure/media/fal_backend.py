"""
fal.ai image backend (Flux family).
"""

import os
import time
from typing import Optional

import httpx

from reelsmith.config import DEFAULT_IMAGE_MODEL, FAL_IMAGE_MODELS
from reelsmith.core import get_logger
from reelsmith.models import GeneratedImage

from .base import ImageBackend

logger = get_logger(__name__, component="fal_backend")

FAL_BASE_URL = "https://fal.run"
DEFAULT_STYLE_SUFFIX = "cinematic, high quality, detailed"


class FalImageBackend(ImageBackend):
    """Synchronous fal.run endpoint; the response carries hosted image URLs."""

    name = "fal"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = FAL_BASE_URL,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or os.getenv("FAL_KEY")
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def model_url(self, model: str) -> str:
        path = FAL_IMAGE_MODELS.get(model, FAL_IMAGE_MODELS[DEFAULT_IMAGE_MODEL])
        return f"{self.base_url}/{path}"

    @staticmethod
    def build_prompt(prompt: str, style: Optional[str]) -> str:
        return f"{prompt}, {style}" if style else f"{prompt}, {DEFAULT_STYLE_SUFFIX}"

    async def generate(
        self,
        prompt: str,
        style: Optional[str],
        image_size: str,
        model: str,
    ) -> GeneratedImage:
        if not self.api_key:
            logger.error("fal.ai API key not configured")
            return GeneratedImage(success=False, error="fal.ai API key not found")

        url = self.model_url(model)
        payload = {
            "prompt": self.build_prompt(prompt, style),
            "image_size": image_size,
            "num_inference_steps": 4,
            "guidance_scale": 3.5,
            "num_images": 1,
            "enable_safety_checker": True,
        }
        headers = {"Authorization": f"Key {self.api_key}", "Content-Type": "application/json"}

        started = time.perf_counter()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
            if not response.is_success:
                logger.error(
                    f"fal.ai request failed with status {response.status_code}",
                    extra={"model": model, "response_text": response.text[:500]},
                )
                return GeneratedImage(
                    success=False, error=f"API request failed: {response.status_code}"
                )

            images = response.json().get("images") or []
            image_url = images[0].get("url") if images else None
            if not image_url:
                return GeneratedImage(success=False, error="No image generated")

        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"fal.ai image generation failed: {e}", extra={"model": model})
            return GeneratedImage(success=False, error=str(e))

        logger.info(
            "fal.ai image generated",
            extra={"model": model, "duration_seconds": round(time.perf_counter() - started, 3)},
        )
        return GeneratedImage(success=True, image_url=image_url)

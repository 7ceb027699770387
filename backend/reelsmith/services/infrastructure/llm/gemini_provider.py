"""
Gemini LLM Provider

Implementation of LLMProvider for Google's Gemini models.
"""

import asyncio
import os
from typing import Any, List, Optional, Union

from google import genai
from google.genai import types

from reelsmith.config import SEGMENTER_MODEL
from reelsmith.core import ProviderError, get_logger

from .base import LLMConfig, LLMProvider, LLMResponse, ProviderType, UsageStats

logger = get_logger(__name__, component="gemini_provider")


def create_gemini_client(api_key: Optional[str] = None) -> Optional[genai.Client]:
    """Build a google-genai client, or None when no API key is configured."""
    api_key = api_key or os.getenv("GEMINI_API_KEY")
    if not api_key:
        return None
    return genai.Client(api_key=api_key)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM Provider"""

    provider_type = ProviderType.GEMINI

    def __init__(self, client: Optional[genai.Client] = None, api_key: Optional[str] = None):
        self.client = client or create_gemini_client(api_key)

    def is_available(self) -> bool:
        return self.client is not None

    def _build_generation_config(self, config: LLMConfig) -> Optional[types.GenerateContentConfig]:
        kwargs = {}

        if config.temperature is not None:
            kwargs["temperature"] = config.temperature

        if config.max_tokens:
            kwargs["max_output_tokens"] = config.max_tokens

        if config.system_instruction:
            kwargs["system_instruction"] = config.system_instruction

        if config.response_schema:
            kwargs["response_mime_type"] = "application/json"
            kwargs["response_schema"] = config.response_schema

        if kwargs:
            return types.GenerateContentConfig(**kwargs)
        return None

    def _extract_usage(self, response: Any) -> Optional[UsageStats]:
        usage = getattr(response, "usage_metadata", None)
        if not usage:
            return None
        return UsageStats(
            input_tokens=getattr(usage, "prompt_token_count", 0) or 0,
            output_tokens=getattr(usage, "candidates_token_count", 0) or 0,
        )

    async def generate(
        self,
        prompt: Union[str, List[Any]],
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a response using the Gemini API

        The SDK call is blocking, so it runs in a worker thread.

        Raises:
            ProviderError: if the provider is not configured or the call fails
        """
        if not self.is_available():
            raise ProviderError("Gemini provider is not available. Check GEMINI_API_KEY.")

        if config is None:
            config = LLMConfig(model=kwargs.get("model", SEGMENTER_MODEL))

        model = kwargs.get("model", config.model)
        request_kwargs = {"model": model, "contents": prompt}
        generation_config = self._build_generation_config(config)
        if generation_config:
            request_kwargs["config"] = generation_config

        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                **request_kwargs
            )
        except Exception as e:
            logger.error(f"Gemini request failed: {e}", extra={"model": model})
            raise ProviderError(f"Gemini request failed: {e}") from e

        return LLMResponse(
            text=response.text.strip() if response.text else "",
            model=model,
            provider=self.provider_type,
            usage=self._extract_usage(response),
            raw_response=response,
        )

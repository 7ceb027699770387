"""
LLM Module - text generation providers

Usage:
    from reelsmith.services.infrastructure.llm import GeminiProvider, LLMConfig
"""

from .base import LLMConfig, LLMProvider, LLMResponse, ProviderType, UsageStats
from .gemini_provider import GeminiProvider, create_gemini_client

__all__ = [
    "LLMConfig",
    "LLMProvider",
    "LLMResponse",
    "ProviderType",
    "UsageStats",
    "GeminiProvider",
    "create_gemini_client",
]

"""
Base classes for LLM providers

Defines the text-generation interface the planner depends on.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ProviderType(str, Enum):
    """Supported LLM providers"""
    GEMINI = "gemini"


@dataclass
class LLMConfig:
    """Configuration for an LLM request"""
    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None
    response_schema: Optional[Dict[str, Any]] = None  # structured JSON output
    system_instruction: Optional[str] = None


@dataclass
class UsageStats:
    """Token usage statistics"""
    input_tokens: int = 0
    output_tokens: int = 0
    total_tokens: int = 0

    def __post_init__(self):
        if self.total_tokens == 0:
            self.total_tokens = self.input_tokens + self.output_tokens


@dataclass
class LLMResponse:
    """Unified response from any LLM provider"""
    text: str
    model: str
    provider: ProviderType
    usage: Optional[UsageStats] = None
    raw_response: Any = None


class LLMProvider(ABC):
    """Abstract base class for LLM providers"""

    provider_type: ProviderType

    @abstractmethod
    async def generate(
        self,
        prompt: Union[str, List[Any]],
        config: Optional[LLMConfig] = None,
        **kwargs
    ) -> LLMResponse:
        """Generate a response from the LLM

        Args:
            prompt: The prompt text or list of content parts (for multimodal)
            config: LLM configuration options
            **kwargs: Additional provider-specific options

        Returns:
            LLMResponse with the generated text and metadata
        """
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is available and properly configured"""
        pass

    @property
    def name(self) -> str:
        return self.provider_type.value

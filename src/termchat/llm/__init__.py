from .base import LLMProvider
from .factory import PROVIDERS, create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import AnthropicProvider, DeepSeekProvider, GeminiProvider, OpenAIProvider

__all__ = [
    "LLMProvider",
    "PROVIDERS",
    "create_llm_provider",
    "ChatMessage",
    "LLMResponse",
    "AnthropicProvider",
    "DeepSeekProvider",
    "GeminiProvider",
    "OpenAIProvider",
]

from typing import Any

from .base import LLMProvider
from .providers import AnthropicProvider, DeepSeekProvider, GeminiProvider, OpenAIProvider

PROVIDERS: dict[str, type[LLMProvider]] = {
    "openai": OpenAIProvider,
    "deepseek": DeepSeekProvider,
    "anthropic": AnthropicProvider,
    "claude": AnthropicProvider,
    "gemini": GeminiProvider,
}


def create_llm_provider(provider: str, **config: Any) -> LLMProvider:
    """Create an LLM provider instance.

    Args:
        provider: Provider type ('openai', 'deepseek', 'anthropic'/'claude', 'gemini')
        **config: Provider-specific configuration; every provider requires
            'api_key' and accepts 'model'

    Returns:
        Initialized LLM provider instance

    Raises:
        ValueError: If provider type is not supported
        TypeError: If 'api_key' is missing

    Examples:
        >>> provider = create_llm_provider("openai", api_key="sk-...", model="gpt-4o-mini")
    """
    provider_cls = PROVIDERS.get(provider.lower())
    if provider_cls is None:
        raise ValueError(
            f"Unsupported provider: {provider}. "
            f"Supported providers: 'openai', 'deepseek', 'anthropic', 'gemini'"
        )

    if "api_key" not in config:
        raise TypeError(f"{provider_cls.__name__} requires 'api_key' in config")

    return provider_cls(**config)

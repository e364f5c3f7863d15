from typing import Any

from openai import AsyncOpenAI

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse


def to_openai_messages(messages: list[ChatMessage]) -> list[dict[str, str]]:
    """Convert chat messages to the Chat Completions request format."""
    return [{"role": msg.role, "content": msg.content} for msg in messages]


def usage_from_completion(completion: Any) -> dict[str, int] | None:
    if not completion.usage:
        return None
    return {
        "prompt_tokens": completion.usage.prompt_tokens,
        "completion_tokens": completion.usage.completion_tokens,
        "total_tokens": completion.usage.total_tokens
    }


def content_from_completion(completion: Any) -> str:
    """Text of the first choice, or an empty string when there is none."""
    if not completion.choices:
        return ""
    return completion.choices[0].message.content or ""


class OpenAIProvider(LLMProvider):
    """OpenAI Chat Completions provider.

    Hidden design decisions:
    - AsyncOpenAI client initialization
    - Message format conversion
    - Authentication mechanism
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-3.5-turbo",
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default chat model
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        # Only send max_tokens when set; some models reject null
        request_params: dict[str, Any] = {
            "model": model or self._model,
            "messages": to_openai_messages(messages),
            "temperature": temperature,
            **kwargs
        }
        if max_tokens is not None:
            request_params["max_tokens"] = max_tokens

        completion = await self._client.chat.completions.create(**request_params)

        return LLMResponse(
            content=content_from_completion(completion),
            model=completion.model,
            usage=usage_from_completion(completion)
        )

    async def close(self) -> None:
        await self._client.close()

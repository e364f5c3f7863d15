"""Anthropic Claude provider.

The Messages API differs from Chat Completions in two ways that matter
here: system text travels in its own ``system`` field, and ``max_tokens``
is mandatory.
"""

from typing import Any

from anthropic import AsyncAnthropic

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_MAX_TOKENS = 4096


def split_system(messages: list[ChatMessage]) -> tuple[str | None, list[dict[str, str]]]:
    """Separate system text from the user/assistant turns.

    Several system messages are joined with blank lines.
    """
    system_parts = [msg.content for msg in messages if msg.role == "system"]
    turns = [
        {"role": msg.role, "content": msg.content}
        for msg in messages
        if msg.role != "system"
    ]
    return ("\n\n".join(system_parts) or None), turns


def text_of(reply: Any) -> str:
    # Tool-use and thinking blocks carry no text
    return "".join(
        block.text for block in reply.content if getattr(block, "text", None)
    )


def usage_of(reply: Any) -> dict[str, int] | None:
    if not reply.usage:
        return None
    prompt, completion = reply.usage.input_tokens, reply.usage.output_tokens
    return {
        "prompt_tokens": prompt,
        "completion_tokens": completion,
        "total_tokens": prompt + completion,
    }


class AnthropicProvider(LLMProvider):
    """Claude models through ``AsyncAnthropic``."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        **client_kwargs: Any
    ):
        self._model = model
        self._client = AsyncAnthropic(api_key=api_key, base_url=base_url, **client_kwargs)

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
        system, turns = split_system(messages)
        if system is not None:
            kwargs["system"] = system

        reply = await self._client.messages.create(
            model=model or self._model,
            messages=turns,
            temperature=temperature,
            max_tokens=max_tokens or DEFAULT_MAX_TOKENS,
            **kwargs
        )
        return LLMResponse(content=text_of(reply), model=reply.model, usage=usage_of(reply))

    async def close(self) -> None:
        await self._client.close()

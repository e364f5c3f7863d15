"""Google Gemini provider.

Gemini names the assistant role ``model`` and takes system text as a
generation setting. It can also answer with no candidates at all (safety
filtering, transient service issues); such replies are retried with a short
backoff before an empty reply is passed on.
"""

import asyncio
from typing import Any

from google import genai
from google.genai import types

from ..base import LLMProvider
from ..models import ChatMessage, LLMResponse

DEFAULT_MODEL = "gemini-2.5-flash"
RETRY_BACKOFF = 0.5  # seconds, multiplied by the attempt number

ROLE_MAP = {"user": "user", "assistant": "model"}


def to_gemini_contents(messages: list[ChatMessage]) -> tuple[str | None, list[types.Content]]:
    """Split system text off and convert the remaining turns.

    Messages with roles Gemini does not know are skipped.
    """
    system_parts = [msg.content for msg in messages if msg.role == "system"]
    contents = [
        types.Content(role=ROLE_MAP[msg.role], parts=[types.Part(text=msg.content)])
        for msg in messages
        if msg.role in ROLE_MAP
    ]
    return ("\n\n".join(system_parts) or None), contents


def text_of(response: Any) -> str:
    if not response.candidates:
        return ""
    content = response.candidates[0].content
    if not content or not content.parts:
        return ""
    return "".join(part.text for part in content.parts if getattr(part, "text", None))


def usage_of(response: Any) -> dict[str, int] | None:
    meta = response.usage_metadata
    if not meta:
        return None
    return {
        "prompt_tokens": meta.prompt_token_count or 0,
        "completion_tokens": meta.candidates_token_count or 0,
        "total_tokens": meta.total_token_count or 0,
    }


class GeminiProvider(LLMProvider):
    """Gemini models through the GenAI SDK's async client."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        max_retries: int = 3,
        **client_kwargs: Any
    ):
        self._model = model
        self._max_retries = max(1, max_retries)
        self._client = genai.Client(api_key=api_key, **client_kwargs)

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
        model_name = model or self._model
        system, contents = to_gemini_contents(messages)
        config = types.GenerateContentConfig(
            temperature=temperature,
            system_instruction=system,
            max_output_tokens=max_tokens,
            **kwargs
        )

        text, usage = "", None
        for attempt in range(1, self._max_retries + 1):
            response = await self._client.aio.models.generate_content(
                model=model_name, contents=contents, config=config
            )
            text, usage = text_of(response), usage_of(response)
            if text or attempt == self._max_retries:
                break
            await asyncio.sleep(RETRY_BACKOFF * attempt)

        return LLMResponse(content=text, model=model_name, usage=usage)

    async def close(self) -> None:
        """Nothing to release; the GenAI client holds no open session."""

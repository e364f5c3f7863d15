"""Completion gateway backed by an LLM provider.

Hides how conversation history is turned into a provider request and how
provider failures are reported: every failure surfaces as GatewayError.
"""

import asyncio
from collections.abc import Callable

from .core.errors import GatewayError, GatewayTimeoutError
from .core.gateway import CompletionGateway, NullGateway
from .core.models import Message
from .llm import ChatMessage, LLMProvider

DEFAULT_TIMEOUT = 60.0

COMPONENT = "LLM"


class LLMGateway(CompletionGateway):
    """Gateway that asks an LLMProvider for the next assistant message.

    Example:
        async with create_llm_provider("openai", api_key=key) as llm:
            gateway = LLMGateway(llm, timeout=30)
            reply = await gateway.send(chat.history())
    """

    def __init__(self, provider: LLMProvider, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        """Initialize the gateway.

        Args:
            provider: LLM provider that performs the completion
            timeout: Seconds to wait for a reply; None or 0 waits forever
        """
        self._provider = provider
        self._timeout = timeout or None
        self._debug_callback: Callable[[str, str, str], None] | None = None

    @property
    def provider(self) -> LLMProvider:
        return self._provider

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def set_debug_callback(self, callback: Callable[[str, str, str], None] | None) -> None:
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, COMPONENT, message)

    async def send(self, history: list[Message]) -> Message | None:
        messages = [ChatMessage(**message.to_wire()) for message in history]
        provider_name = type(self._provider).__name__

        self._debug("debug", f"{provider_name}: requesting reply for {len(messages)} message(s)")

        try:
            response = await asyncio.wait_for(
                self._provider.chat_completion(messages),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            self._debug("error", f"{provider_name}: no reply after {self._timeout}s")
            raise GatewayTimeoutError(
                f"No reply after {self._timeout:g}s", provider=provider_name
            ) from e
        except Exception as e:
            self._debug("error", f"{provider_name}: {e}")
            raise GatewayError(f"{provider_name} request failed: {e}", provider=provider_name) from e

        if response.usage:
            self._debug("debug", f"{provider_name}: usage {response.usage}")

        if not response.content:
            self._debug("warning", f"{provider_name}: empty reply")
            return None

        return Message.assistant(response.content)

    async def close(self) -> None:
        await self._provider.close()


__all__ = ["CompletionGateway", "DEFAULT_TIMEOUT", "LLMGateway", "NullGateway"]

"""Completion gateway contract.

This module hides how a reply is obtained for a conversation. The core only
knows that, given an ordered message history, a gateway asynchronously
produces zero or one assistant message.
"""

from abc import ABC, abstractmethod

from .models import Message


class CompletionGateway(ABC):
    """Asynchronous source of assistant replies."""

    @abstractmethod
    async def send(self, history: list[Message]) -> Message | None:
        """Produce a reply for ``history``.

        Args:
            history: Full ordered conversation, oldest message first

        Returns:
            An assistant Message, or None when the service returned no content

        Raises:
            GatewayError: Network, authentication, rate-limit or
                malformed-response failures
        """

    async def close(self) -> None:
        """Release any resources held by the gateway."""


class NullGateway(CompletionGateway):
    """Gateway that never replies.

    Used when no completion service is configured.
    """

    async def send(self, history: list[Message]) -> Message | None:
        return None

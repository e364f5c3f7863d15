"""Pytest configuration and shared fixtures."""
import asyncio

import pytest

from termchat.core import Chat, ChatState, CompletionGateway, GatewayError, Message


class StubGateway(CompletionGateway):
    """Gateway returning a canned reply and recording what it saw."""

    def __init__(self, reply: str | None = None) -> None:
        self.reply = reply
        self.calls: list[list[Message]] = []
        self.loading_seen: list[bool] = []
        self.state: ChatState | None = None

    async def send(self, history: list[Message]) -> Message | None:
        self.calls.append(history)
        if self.state is not None:
            self.loading_seen.append(self.state.loading)
        if self.reply is None:
            return None
        return Message.assistant(self.reply)


class FailingGateway(CompletionGateway):
    """Gateway that always fails."""

    def __init__(self) -> None:
        self.calls = 0

    async def send(self, history: list[Message]) -> Message | None:
        self.calls += 1
        raise GatewayError("service unavailable", provider="stub")


class BlockingGateway(CompletionGateway):
    """Gateway that waits until released, so tests can act mid-request."""

    def __init__(self, reply: str = "late reply") -> None:
        self.reply = reply
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.cancelled = False

    async def send(self, history: list[Message]) -> Message | None:
        self.started.set()
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return Message.assistant(self.reply)


@pytest.fixture
def stub_gateway():
    """Return a gateway that never replies."""
    return StubGateway()


@pytest.fixture
def demo_state(stub_gateway):
    """Return a state with a single empty "Demo" chat."""
    state = ChatState(gateway=stub_gateway, chats=[Chat(title="Demo")])
    stub_gateway.state = state
    return state


@pytest.fixture
def three_chats():
    """Return three empty chats."""
    return [Chat(title="One"), Chat(title="Two"), Chat(title="Three")]


@pytest.fixture
def conversation():
    """Return a chat holding one exchange."""
    return Chat.with_messages(
        "Christmas",
        [Message.user("What is christmas?"), Message.assistant("A holiday.")],
    )


@pytest.fixture
def failing_gateway():
    """Return a gateway that raises GatewayError."""
    return FailingGateway()


@pytest.fixture
def blocking_gateway():
    """Return a gateway that answers only once released."""
    return BlockingGateway()

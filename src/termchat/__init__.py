"""
Termchat: a keyboard-driven terminal chat client for LLM completion services.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .core import (
    Action,
    ActionKind,
    Chat,
    ChatState,
    CompletionGateway,
    GatewayError,
    Message,
    NullGateway,
    Role,
)
from .gateway import LLMGateway

__all__ = [
    "Action",
    "ActionKind",
    "Chat",
    "ChatState",
    "CompletionGateway",
    "GatewayError",
    "LLMGateway",
    "Message",
    "NullGateway",
    "Role",
]

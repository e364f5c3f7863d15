"""Interaction core of the chat client.

Module structure (each module hides one design decision):
- cursor.py: caret clamping
- text_field.py: editable single-line buffer
- selectable_list.py: bounded list selection with wraparound
- models.py: chats, messages and roles
- actions.py: input alphabet
- errors.py: exceptions surfaced to callers
- gateway.py: completion gateway contract
- state.py: navigation state machine and submission flow
"""

from .actions import Action, ActionKind
from .cursor import Cursor
from .errors import GatewayError, GatewayTimeoutError, TermchatError
from .gateway import CompletionGateway, NullGateway
from .models import Chat, Message, Role, demo_chats
from .selectable_list import SelectableList
from .state import ChatState, Modal, Section
from .text_field import DEFAULT_MAX_LENGTH, TextField

__all__ = [
    "Action",
    "ActionKind",
    "Chat",
    "ChatState",
    "CompletionGateway",
    "Cursor",
    "DEFAULT_MAX_LENGTH",
    "GatewayError",
    "GatewayTimeoutError",
    "Message",
    "Modal",
    "NullGateway",
    "Role",
    "Section",
    "SelectableList",
    "TermchatError",
    "TextField",
    "demo_chats",
]

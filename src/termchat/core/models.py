"""Conversation data model.

Hides the representation of chats and messages: ids, roles and the wire
strings roles serialize to.
"""

from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from .selectable_list import SelectableList

ID_LENGTH = 7


def random_id(length: int = ID_LENGTH) -> str:
    """Short opaque token used for chat and message ids."""
    return uuid4().hex[:length]


class Role(str, Enum):
    """Author of a message; values are the completion API wire strings."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single chat message. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=random_id, description="Opaque message id")
    role: Role = Field(description="Author of the message")
    content: str = Field(description="Message text")

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)

    def to_wire(self) -> dict[str, str]:
        """Serialize to the ``{"role", "content"}`` shape the gateway sends."""
        return {"role": self.role.value, "content": self.content}


@dataclass
class Chat:
    """A titled conversation owning its selectable message list."""

    title: str
    messages: SelectableList[Message] = field(default_factory=SelectableList)
    id: str = field(default_factory=random_id)

    @classmethod
    def with_messages(cls, title: str, messages: list[Message]) -> "Chat":
        return cls(title=title, messages=SelectableList(messages))

    def append_message(self, message: Message) -> None:
        self.messages.append(message)

    def rename(self, title: str) -> None:
        self.title = title

    def history(self) -> list[Message]:
        """Snapshot of the ordered message history."""
        return list(self.messages.items)


def demo_chats() -> list[Chat]:
    """Seed conversations shown on first launch."""
    return [
        Chat(title="Demo"),
        Chat.with_messages(
            "Christmas",
            [
                Message.user("What is christmas?"),
                Message.assistant(
                    "Christmas is a religious holiday celebrating the birth of Jesus "
                    "as well as a cultural and commercial event. Learn about the "
                    "history of Christmas, Santa Claus, and holiday traditions worldwide."
                ),
            ],
        ),
    ]

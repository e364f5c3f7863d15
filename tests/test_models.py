"""Unit tests for the conversation models."""
import pytest
from pydantic import ValidationError

from termchat.core import Chat, Message, Role, demo_chats


class TestMessage:
    """Tests for Message model."""

    def test_user_message(self):
        """Test the user constructor sets the role."""
        message = Message.user("hi")

        assert message.role == Role.USER
        assert message.content == "hi"
        assert message.id

    def test_roles_serialize_to_wire_strings(self):
        """Test roles map to the literal completion API strings."""
        assert Message.user("a").to_wire() == {"role": "user", "content": "a"}
        assert Message.assistant("b").to_wire() == {"role": "assistant", "content": "b"}

    def test_ids_are_unique(self):
        """Test every message gets its own id."""
        assert Message.user("a").id != Message.user("a").id

    def test_message_is_immutable(self):
        """Test messages cannot be edited after creation."""
        message = Message.user("hi")

        with pytest.raises(ValidationError):
            message.content = "changed"  # type: ignore

    def test_unknown_role_rejected(self):
        """Test free-form roles fail validation."""
        with pytest.raises(ValidationError):
            Message(role="system", content="x")


class TestChat:
    """Tests for Chat model."""

    def test_new_chat_is_empty(self):
        """Test a new chat has no messages and no selection."""
        chat = Chat(title="Demo")

        assert len(chat.messages) == 0
        assert chat.messages.selected is None

    def test_history_is_a_snapshot(self):
        """Test history() is not affected by later appends."""
        chat = Chat(title="Demo")
        chat.append_message(Message.user("one"))
        history = chat.history()
        chat.append_message(Message.user("two"))

        assert [m.content for m in history] == ["one"]

    def test_rename(self):
        """Test renaming keeps the id."""
        chat = Chat(title="Old")
        chat_id = chat.id
        chat.rename("New")

        assert chat.title == "New"
        assert chat.id == chat_id


class TestDemoChats:
    """Tests for the seed conversations."""

    def test_demo_chats(self):
        """Test the seed has an empty Demo chat and one exchange."""
        chats = demo_chats()

        assert [c.title for c in chats] == ["Demo", "Christmas"]
        assert len(chats[0].messages) == 0
        assert [m.role for m in chats[1].messages] == [Role.USER, Role.ASSISTANT]

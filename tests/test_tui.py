"""Headless tests for the Textual application."""
import pytest

from termchat.core import Chat, CompletionGateway, Message, Section
from termchat.ui import ChatTextualApp, DebugPanel
from termchat.ui.screens import ChatTitleScreen


class EchoGateway(CompletionGateway):
    async def send(self, history: list[Message]) -> Message | None:
        return Message.assistant(f"echo: {history[-1].content}")


async def press_keys(app, pilot, *keys: str) -> None:
    for key in keys:
        await pilot.press(key)
        await app.workers.wait_for_complete()
        await pilot.pause()


@pytest.mark.tui
class TestChatTextualApp:
    """Tests driving the app through key presses."""

    @pytest.mark.asyncio
    async def test_starts_with_demo_chats(self):
        """Test the seed chats are loaded and the first is selected."""
        app = ChatTextualApp()
        async with app.run_test() as pilot:
            await pilot.pause()

            assert [c.title for c in app.state.chats] == ["Demo", "Christmas"]
            assert app.state.chats.selected == 0
            assert app.state.section is Section.CHATS

    @pytest.mark.asyncio
    async def test_send_message(self):
        """Test opening a chat and sending a message gets a reply."""
        app = ChatTextualApp(gateway=EchoGateway(), chats=[Chat(title="Demo")])
        async with app.run_test() as pilot:
            await press_keys(app, pilot, "enter", "enter", "h", "i", "enter")

            chat = app.state.active_chat
            assert [m.content for m in chat.messages] == ["hi", "echo: hi"]
            assert app.state.loading is False
            assert app.state.input.is_empty()

    @pytest.mark.asyncio
    async def test_vi_keys_navigate_chat_list(self):
        """Test j/k move the chat selection."""
        app = ChatTextualApp(chats=[Chat(title="One"), Chat(title="Two")])
        async with app.run_test() as pilot:
            await press_keys(app, pilot, "enter", "j")

            assert app.state.focus is Section.CHATS
            assert app.state.chats.selected == 1

    @pytest.mark.asyncio
    async def test_new_chat_dialog(self):
        """Test the dialog opens on 'n' and closes after confirming."""
        app = ChatTextualApp(chats=[Chat(title="Demo")])
        async with app.run_test() as pilot:
            await press_keys(app, pilot, "enter", "n")
            assert isinstance(app.screen, ChatTitleScreen)

            await press_keys(app, pilot, "q", "enter")
            assert not isinstance(app.screen, ChatTitleScreen)
            assert [c.title for c in app.state.chats] == ["Demo", "q"]

    @pytest.mark.asyncio
    async def test_ctrl_d_toggles_log_panel(self):
        """Test Ctrl+D shows and hides the log panel."""
        app = ChatTextualApp(chats=[Chat(title="Demo")])
        async with app.run_test() as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display is False

            await press_keys(app, pilot, "ctrl+d")
            assert panel.display is True
            assert app.state.focus is None

            await press_keys(app, pilot, "ctrl+d")
            assert panel.display is False

    @pytest.mark.asyncio
    async def test_blank_title_keeps_dialog_open(self):
        """Test Enter on an empty title leaves the dialog with its hint."""
        app = ChatTextualApp(chats=[Chat(title="Demo")])
        async with app.run_test() as pilot:
            await press_keys(app, pilot, "enter", "n", "enter")

            assert isinstance(app.screen, ChatTitleScreen)
            assert len(app.state.chats) == 1

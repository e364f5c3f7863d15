"""Modal screens for the TUI.

This module hides the design decisions about:
- Chat title dialog appearance (CSS, layout)
- How the modal text field is presented

Key handling stays in the app: the dialog only mirrors ChatState, and the
app pushes or pops it whenever ``state.modal`` changes.
"""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from ..core.state import ChatState
from .formatting import modal_title, render_field


class ChatTitleScreen(ModalScreen[None]):
    """New Chat / Rename Chat dialog showing the modal text field."""

    CSS = """
    ChatTitleScreen {
        align: center middle;
        background: $background 70%;
    }

    #chat-title-dialog {
        width: 50%;
        height: auto;
        border: tall $success;
        background: $surface;
        padding: 0 1;
    }

    #chat-title-heading {
        width: 100%;
        text-style: bold;
        color: $foreground;
        padding: 0 0 1 0;
    }

    #chat-title-field {
        width: 100%;
        height: 1;
        color: $warning;
    }

    #chat-title-hint {
        width: 100%;
        color: $text-muted;
        padding: 1 0 0 0;
    }
    """

    def __init__(self, state: ChatState) -> None:
        super().__init__()
        self._state = state

    def compose(self) -> ComposeResult:
        with Vertical(id="chat-title-dialog"):
            yield Static(id="chat-title-heading")
            yield Static(id="chat-title-field")
            yield Static("Enter to confirm, Esc to cancel. The title cannot be blank.", id="chat-title-hint")

    def on_mount(self) -> None:
        self.update_from(self._state)

    def update_from(self, state: ChatState) -> None:
        self.query_one("#chat-title-heading", Static).update(modal_title(state.modal))
        self.query_one("#chat-title-field", Static).update(
            render_field(state.modal_input, show_cursor=True)
        )

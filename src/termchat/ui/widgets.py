"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat list and message rendering
- Border highlighting for hovered and focused panels
- Caret display in the composer
- Log rendering and level filtering

Widgets never mutate ChatState; they redraw from it in ``update_from``.
"""

from datetime import datetime

from rich.console import Group
from rich.text import Text
from textual.containers import VerticalScroll
from textual.widgets import RichLog, Static

from ..core.state import ChatState, Section
from .config import LOG_MAX_MESSAGE_LENGTH, LOG_TIMESTAMP_FORMAT, LogLevel
from .formatting import (
    FOCUSED,
    HOVERED,
    help_text,
    input_title,
    messages_title,
    render_field,
    render_message,
    section_status,
)


def _apply_status(widget: Static | VerticalScroll, status: str) -> None:
    widget.set_class(status == FOCUSED, "-focused")
    widget.set_class(status == HOVERED, "-hovered")


class ChatListPanel(Static):
    """List of conversations with the selected one highlighted."""

    BORDER_TITLE = "Chats"

    def update_from(self, state: ChatState) -> None:
        _apply_status(self, section_status(state, Section.CHATS))

        lines = []
        for index, chat in enumerate(state.chats):
            marker = "* " if index == state.chats.selected else "  "
            style = "bold black on yellow" if index == state.chats.selected else ""
            if index == state.active_chat_idx:
                style = f"{style} underline".strip()
            label = chat.title
            if state.is_in_flight(chat):
                label = f"{label} ..."
            lines.append(Text(f"{marker}{label}", style=style))

        self.border_subtitle = f"{len(state.chats)} chats"
        self.update(Group(*lines) if lines else Text("No chats - press N", style="dim"))


class MessagesPanel(VerticalScroll):
    """Scrollable messages of the active chat."""

    BORDER_TITLE = "Messages (0)"
    can_focus = False

    def compose(self):
        yield Static(id="messages-body")

    def update_from(self, state: ChatState) -> None:
        _apply_status(self, section_status(state, Section.MESSAGES))
        self.border_title = messages_title(state)

        body = self.query_one("#messages-body", Static)
        chat = state.active_chat
        if chat is None:
            body.update(Text("Select a chat to see its messages", style="dim"))
            return

        rendered = [
            render_message(message, index == chat.messages.selected)
            for index, message in enumerate(chat.messages)
        ]
        body.update(Group(*rendered))

        if chat.messages.selected is None:
            self.scroll_end(animate=False)


class InputPanel(Static):
    """Composer showing the text field and its caret."""

    BORDER_TITLE = "Input"

    def update_from(self, state: ChatState) -> None:
        _apply_status(self, section_status(state, Section.INPUT))
        self.border_title = input_title(state)
        self.update(render_field(state.input, show_cursor=state.focus is Section.INPUT))


class HelpBar(Static):
    """One-line key hints for the current section and focus."""

    def update_from(self, state: ChatState) -> None:
        self.update(Text(help_text(state), style="dim"))


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"
    can_focus = False

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "CORE": "green",
        "LLM": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, CORE, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{LogLevel.name(level):<5} ", level_color),
            (f"[{component}] ", comp_color),
            message,
        )
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        self.log(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

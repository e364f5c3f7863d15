"""Text formatting for panel titles, help lines and text fields.

Pure functions over ChatState so the widgets only decide where things go,
not what they say.
"""

from rich.text import Text

from ..core.models import Message, Role
from ..core.state import ChatState, Modal, Section
from ..core.text_field import TextField

FOCUSED = "focused"
HOVERED = "hovered"
NORMAL = "normal"

HOVER_HELP = "Q to quit, ENTER to select, H/L to switch panel"

FOCUS_HELP = {
    Section.CHATS: "Esc to unfocus, Enter to open, J/K to move, N new, Backspace to delete",
    Section.MESSAGES: "Esc to unfocus, Backspace to remove, J/K to move, N new, R rename",
    Section.INPUT: "Esc to unfocus, Enter to send",
    Section.MODAL: "Esc to cancel, Enter to confirm (title cannot be blank)",
}

MODAL_TITLES = {
    Modal.NEW_CHAT: "New Chat",
    Modal.RENAME_CHAT: "Rename Chat",
}


def section_status(state: ChatState, section: Section) -> str:
    """Border status of a panel: focused wins over hovered."""
    if state.focus is section:
        return FOCUSED
    if state.section is section:
        return HOVERED
    return NORMAL


def help_text(state: ChatState) -> str:
    if state.focus is None:
        return HOVER_HELP
    return FOCUS_HELP[state.focus]


def input_title(state: ChatState) -> str:
    if state.is_in_flight(state.active_chat):
        return "Input (Loading...)"
    return f"Input ({len(state.input)}/{state.input.max_length})"


def messages_title(state: ChatState) -> str:
    chat = state.active_chat
    if chat is None:
        return "Messages (0)"
    return f"{chat.title} - Messages ({len(chat.messages)})"


def modal_title(modal: Modal | None) -> str:
    if modal is None:
        return ""
    return MODAL_TITLES[modal]


def render_field(field: TextField, show_cursor: bool) -> Text:
    """Render a text field, marking the caret with a reversed cell."""
    text = Text(field.text)
    if not show_cursor:
        return text

    position = field.cursor_position
    if position >= len(field.text):
        text.append(" ", style="reverse")
    else:
        text.stylize("reverse", position, position + 1)
    return text


def render_message(message: Message, selected: bool) -> Text:
    """User messages align right, assistant messages left."""
    justify = "right" if message.role is Role.USER else "left"
    style = "bold yellow" if selected else ""
    return Text(message.content, style=style, justify=justify)

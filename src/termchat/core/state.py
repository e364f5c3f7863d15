"""Navigation state machine for the chat client.

Owns everything the panels render: the chat list, the active chat, the
composer and modal text fields, and the hovered section / focused section /
open modal triple. Input reaches it one Action at a time through
``dispatch``; the only suspension point is the wait for a gateway reply
during message submission.
"""

import asyncio
from collections.abc import Callable
from enum import Enum

from .actions import Action, ActionKind
from .gateway import CompletionGateway, NullGateway
from .models import Chat, Message
from .selectable_list import SelectableList
from .text_field import DEFAULT_MAX_LENGTH, TextField

DebugCallback = Callable[[str, str, str], None]

COMPONENT = "CORE"


class Section(str, Enum):
    """Panel that receives keyboard routing."""

    CHATS = "chats"
    MESSAGES = "messages"
    INPUT = "input"
    MODAL = "modal"


class Modal(str, Enum):
    NEW_CHAT = "new_chat"
    RENAME_CHAT = "rename_chat"


class ChatState:
    """Application state and its transition function.

    ``section`` and ``focus`` both report ``Section.MODAL`` whenever a modal
    is open; the underlying panel values are kept aside and cannot be set to
    ``MODAL`` directly, so an open modal always owns the focus.

    Submissions are tracked per chat. While a chat waits for its reply the
    rest of the UI stays interactive, further submissions to that chat are
    ignored, and deleting the chat cancels the pending request.
    """

    def __init__(
        self,
        gateway: CompletionGateway | None = None,
        chats: list[Chat] | None = None,
        max_input_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self._gateway = gateway or NullGateway()
        self.chats: SelectableList[Chat] = SelectableList(chats or [])
        self.input = TextField(max_input_length)
        self.modal_input = TextField(max_input_length)
        self.active_chat_idx: int | None = None
        self.loading = False
        self.modal: Modal | None = None
        self._section = Section.CHATS
        self._focus: Section | None = None
        self._pending: dict[str, asyncio.Task] = {}
        self._debug_callback: DebugCallback | None = None

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def section(self) -> Section:
        if self.modal is not None:
            return Section.MODAL
        return self._section

    @property
    def focus(self) -> Section | None:
        if self.modal is not None:
            return Section.MODAL
        return self._focus

    @property
    def active_chat(self) -> Chat | None:
        if self.active_chat_idx is None:
            return None
        if self.active_chat_idx >= len(self.chats):
            return None
        return self.chats[self.active_chat_idx]

    def is_in_flight(self, chat: Chat | None) -> bool:
        """Whether ``chat`` is waiting for a gateway reply."""
        return chat is not None and chat.id in self._pending

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for state transition logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, COMPONENT, message)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def dispatch(self, action: Action) -> None:
        """Apply one action to the state.

        Every (state, action) pair is defined; pairs without a rule are
        ignored.

        Raises:
            GatewayError: If submitting a message failed to get a reply.
                ``loading`` is already reset when this propagates.
        """
        focus = self.focus

        if focus is None:
            self._dispatch_hover(action)
        elif focus is Section.MODAL:
            self._dispatch_modal(action)
        elif focus is Section.CHATS:
            self._dispatch_chats(action)
        elif focus is Section.MESSAGES:
            self._dispatch_messages(action)
        elif focus is Section.INPUT:
            await self._dispatch_input(action)

    def _set_focus(self, section: Section) -> None:
        self._section = section
        self._focus = section

    def _release_focus(self) -> None:
        self._focus = None

    def _dispatch_hover(self, action: Action) -> None:
        kind = action.kind

        if self._section is Section.CHATS:
            if kind is ActionKind.ENTER:
                self._set_focus(Section.CHATS)
                if self.chats.selected is None:
                    self.chats.select_first()
            elif kind in (ActionKind.LEFT, ActionKind.RIGHT):
                self._section = Section.MESSAGES
            return

        if kind in (ActionKind.ESC, ActionKind.LEFT, ActionKind.RIGHT) or action.is_char("c"):
            self._section = Section.CHATS
            return

        if self._section is Section.MESSAGES:
            if kind is ActionKind.ENTER:
                self._set_focus(Section.MESSAGES)
            elif kind in (ActionKind.UP, ActionKind.DOWN):
                self._section = Section.INPUT
            elif action.is_char("i"):
                self._set_focus(Section.INPUT)
        elif self._section is Section.INPUT:
            if kind is ActionKind.ENTER:
                self._set_focus(Section.INPUT)
            elif kind in (ActionKind.UP, ActionKind.DOWN):
                self._section = Section.MESSAGES
            elif action.is_char("m"):
                self._set_focus(Section.MESSAGES)

    def _dispatch_modal(self, action: Action) -> None:
        kind = action.kind

        if kind is ActionKind.ESC:
            self._cancel_modal()
        elif kind is ActionKind.ENTER:
            self._confirm_modal()
        elif kind is ActionKind.CHAR and action.char:
            self.modal_input.insert(action.char)
        elif kind is ActionKind.BACKSPACE:
            self.modal_input.delete()
        elif kind is ActionKind.LEFT:
            self.modal_input.left()
        elif kind is ActionKind.RIGHT:
            self.modal_input.right()
        elif kind is ActionKind.KEY:
            _edit_key(self.modal_input, action.key)

    def _dispatch_chats(self, action: Action) -> None:
        kind = action.kind

        if kind is ActionKind.UP:
            self.chats.prev()
        elif kind is ActionKind.DOWN:
            self.chats.next()
        elif kind is ActionKind.ENTER:
            selected = self.chats.selected
            if selected is None:
                self._debug("debug", "Enter on chat list without a selection ignored")
                return
            self.active_chat_idx = selected
            self._set_focus(Section.INPUT)
        elif kind is ActionKind.BACKSPACE:
            self.delete_selected_chat()
        elif kind is ActionKind.ESC:
            self._release_focus()
        elif action.is_char("n"):
            self.open_modal(Modal.NEW_CHAT)

    def _dispatch_messages(self, action: Action) -> None:
        kind = action.kind

        if kind is ActionKind.ESC:
            self._release_focus()
            return

        chat = self.active_chat
        if chat is None:
            return

        if kind is ActionKind.BACKSPACE:
            self.delete_selected_message()
        elif kind is ActionKind.UP:
            chat.messages.prev()
        elif kind is ActionKind.DOWN:
            chat.messages.next()
        elif action.is_char("n"):
            self.open_modal(Modal.NEW_CHAT)
        elif action.is_char("r"):
            self.open_modal(Modal.RENAME_CHAT, chat.title)

    async def _dispatch_input(self, action: Action) -> None:
        kind = action.kind

        if kind is ActionKind.ENTER:
            await self.submit_message()
        elif kind is ActionKind.CHAR and action.char:
            self.input.insert(action.char)
        elif kind is ActionKind.BACKSPACE:
            self.input.delete()
        elif kind is ActionKind.LEFT:
            self.input.left()
        elif kind is ActionKind.RIGHT:
            self.input.right()
        elif kind is ActionKind.KEY:
            _edit_key(self.input, action.key)
        elif kind is ActionKind.ESC:
            self._release_focus()

    # ------------------------------------------------------------------
    # Modal
    # ------------------------------------------------------------------

    def open_modal(self, modal: Modal, value: str | None = None) -> None:
        self.modal = modal
        self.modal_input.clear()
        if value:
            self.modal_input.set_value(value)

    def close_modal(self) -> None:
        """Close the modal and return to hovering the chat list."""
        self.modal = None
        self.modal_input.clear()
        self._section = Section.CHATS
        self._focus = None

    def _cancel_modal(self) -> None:
        self.close_modal()
        self._set_focus(Section.CHATS)
        if self.active_chat_idx is not None:
            self.chats.select(self.active_chat_idx)
        else:
            self.chats.select_first()

    def _confirm_modal(self) -> None:
        title = self.modal_input.text.strip()
        if not title:
            self._debug("debug", "Empty chat title ignored")
            return

        if self.modal is Modal.NEW_CHAT:
            self.new_chat(title)
        elif self.modal is Modal.RENAME_CHAT:
            self.rename_current_chat(title)

    # ------------------------------------------------------------------
    # Chats and messages
    # ------------------------------------------------------------------

    def new_chat(self, title: str) -> Chat:
        chat = Chat(title=title)
        self.chats.append(chat)
        self.chats.select_last()
        self.close_modal()
        self._set_focus(Section.CHATS)
        self._debug("info", f"Created chat '{title}'")
        return chat

    def rename_current_chat(self, title: str) -> None:
        chat = self.active_chat
        if chat is not None:
            self._debug("info", f"Renamed chat '{chat.title}' to '{title}'")
            chat.rename(title)
        self.close_modal()

    def delete_selected_chat(self) -> None:
        index = self.chats.selected
        if index is None:
            return

        chat = self.chats.remove_at(index)
        if chat is None:
            return

        self._cancel_pending(chat)

        if self.active_chat_idx is not None:
            if self.active_chat_idx == index:
                self.active_chat_idx = None
            elif self.active_chat_idx > index:
                self.active_chat_idx -= 1

        self._debug("info", f"Deleted chat '{chat.title}'")

    def delete_selected_message(self) -> None:
        chat = self.active_chat
        if chat is not None:
            chat.messages.remove_selected()

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    async def submit_message(self) -> None:
        """Send the composer text to the active chat and await the reply.

        Empty or whitespace-only text only clears the composer. Otherwise
        the user message is appended immediately, the composer is cleared,
        and the gateway reply (if any) is appended once it arrives.
        ``loading`` is reset even when the gateway raises.
        """
        if self.input.is_empty():
            self.input.clear()
            return

        chat = self.active_chat
        if self.is_in_flight(chat):
            self._debug("warning", f"Chat '{chat.title}' is still waiting for a reply")
            return

        content = self.input.text.strip()
        if not content:
            self.input.clear()
            return

        self.loading = True
        message = Message.user(content)
        self.input.clear()

        try:
            if chat is None:
                self._debug("debug", "No active chat, message discarded")
                return

            chat.append_message(message)
            self._debug("info", f"Sending {len(chat.messages)} message(s) from '{chat.title}'")

            reply = await self._request_reply(chat)
            if reply is not None:
                chat.append_message(reply)
            else:
                self._debug("debug", f"No reply appended to '{chat.title}'")
        finally:
            self.loading = bool(self._pending)

    async def _request_reply(self, chat: Chat) -> Message | None:
        task = asyncio.ensure_future(self._gateway.send(chat.history()))
        self._pending[chat.id] = task

        try:
            await asyncio.wait({task})
        except asyncio.CancelledError:
            task.cancel()
            raise
        finally:
            if self._pending.get(chat.id) is task:
                del self._pending[chat.id]

        if task.cancelled():
            self._debug("info", f"Reply for '{chat.title}' dropped")
            return None

        return task.result()

    def _cancel_pending(self, chat: Chat) -> None:
        task = self._pending.pop(chat.id, None)
        if task is not None:
            task.cancel()
            self._debug("info", f"Cancelled pending reply for '{chat.title}'")

    def cancel_all(self) -> None:
        """Cancel every pending gateway request."""
        for task in self._pending.values():
            task.cancel()
        self._pending.clear()


def _edit_key(field: TextField, key: str | None) -> None:
    if key == "home":
        field.home()
    elif key == "end":
        field.end()

"""Main Textual TUI application.

Translates key presses into Actions, feeds them to ChatState and redraws
the panels from the resulting state.
"""

import asyncio
import contextlib

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header

from ..core.actions import Action
from ..core.errors import GatewayError
from ..core.gateway import CompletionGateway, NullGateway
from ..core.models import Chat, demo_chats
from ..core.state import ChatState
from .config import (
    INPUT_MAX_LENGTH,
    NOTIFY_ERROR_TIMEOUT,
    NOTIFY_TIMEOUT,
    TICK_INTERVAL,
    LogLevel,
)
from .keymap import is_quit_key, translate_key
from .screens import ChatTitleScreen
from .styles import APP_CSS
from .themes import TERMCHAT_DARK
from .widgets import ChatListPanel, DebugPanel, HelpBar, InputPanel, MessagesPanel


class ChatTextualApp(App):
    """Textual TUI for chatting with a completion gateway."""

    CSS = APP_CSS
    TITLE = "termchat"

    BINDINGS = [
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
        Binding("ctrl+c", "quit", "Quit", priority=True),
    ]
    # App-level keys never reach the state machine
    BINDING_KEYS = frozenset(binding.key for binding in BINDINGS)

    def __init__(
        self,
        gateway: CompletionGateway | None = None,
        chats: list[Chat] | None = None,
        log_level: str | None = None,
        model_name: str | None = None,
    ) -> None:
        super().__init__()
        self._gateway = gateway or NullGateway()
        self._log_level = log_level
        self._model_name = model_name or "offline"
        self.state = ChatState(
            gateway=self._gateway,
            chats=demo_chats() if chats is None else chats,
            max_input_length=INPUT_MAX_LENGTH,
        )
        self._modal_screen: ChatTitleScreen | None = None
        self._log_panel: DebugPanel | None = None

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="main"):
            yield ChatListPanel(id="chat-list")
            with Vertical(id="right-panel"):
                yield HelpBar(id="help-bar")
                yield MessagesPanel(id="messages")
                yield InputPanel(id="composer")

        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        self.register_theme(TERMCHAT_DARK)
        self.theme = "termchat-dark"
        self.sub_title = self._model_name

        # Panels live on the default screen; keep references for when a modal is on top
        self._chat_list = self.query_one("#chat-list", ChatListPanel)
        self._messages = self.query_one("#messages", MessagesPanel)
        self._composer = self.query_one("#composer", InputPanel)
        self._help_bar = self.query_one("#help-bar", HelpBar)
        self._log_panel = log_panel = self.query_one("#debug-panel", DebugPanel)

        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self.state.set_debug_callback(self._debug_callback)
        if hasattr(self._gateway, "set_debug_callback"):
            self._gateway.set_debug_callback(self._debug_callback)

        self.state.chats.select_first()
        self.set_interval(TICK_INTERVAL, self.refresh_view)
        self.refresh_view()

    def on_unmount(self) -> None:
        self.state.cancel_all()

    def _debug_callback(self, level: str, component: str, message: str) -> None:
        """Route state and gateway log lines to the log panel."""
        if self._log_panel is not None:
            self._log_panel.log(component, message, LogLevel.from_string(level))

    def on_key(self, event: events.Key) -> None:
        if event.key in self.BINDING_KEYS:
            return

        focus = self.state.focus
        character = event.character if event.is_printable else None

        if is_quit_key(character, focus):
            event.stop()
            self.exit()
            return

        action = translate_key(event.key, character, focus)
        event.stop()
        event.prevent_default()
        self.run_worker(self._dispatch(action), group="dispatch", exit_on_error=False)

    async def _dispatch(self, action: Action) -> None:
        """Apply one action; gateway failures are reported, not fatal."""
        try:
            await self.state.dispatch(action)
        except GatewayError as e:
            self._debug_callback("error", "TUI", f"Reply failed: {e}")
            self.notify(f"Error: {str(e)[:80]}", severity="error", timeout=NOTIFY_ERROR_TIMEOUT)
        finally:
            self.refresh_view()

    def refresh_view(self) -> None:
        """Redraw every panel from the current state."""
        state = self.state
        self._chat_list.update_from(state)
        self._messages.update_from(state)
        self._composer.update_from(state)
        self._help_bar.update_from(state)
        self._sync_modal()

    def _sync_modal(self) -> None:
        if self.state.modal is not None:
            if self._modal_screen is None:
                self._modal_screen = ChatTitleScreen(self.state)
                self.push_screen(self._modal_screen)
            elif self._modal_screen.is_mounted:
                self._modal_screen.update_from(self.state)
        elif self._modal_screen is not None:
            self._modal_screen = None
            self.pop_screen()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        is_visible = self._log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=NOTIFY_TIMEOUT)


async def run_textual_tui(
    gateway: CompletionGateway | None = None,
    log_level: str | None = None,
    model_name: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        gateway: Completion gateway answering submitted messages
        log_level: Log level for panel (debug/info/warning/error), None to hide
        model_name: Shown in the header subtitle
    """
    app = ChatTextualApp(gateway=gateway, log_level=log_level, model_name=model_name)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        app.state.cancel_all()
        if gateway is not None:
            with contextlib.suppress(RuntimeError):
                await gateway.close()

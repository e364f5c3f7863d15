"""Terminal UI module for termchat.

Provides a Textual-based TUI around ChatState.

Module structure (each module hides a design decision):
- keymap.py: key press to Action translation
- formatting.py: titles, help lines and caret rendering
- widgets.py: panels (chat list, messages, composer, log)
- screens.py: New Chat / Rename Chat dialog
- styles.py: CSS layout
- themes.py: color palette
- config.py: log levels and UI constants
- app.py: application orchestration (key routing, redraws, error toasts)
"""

from .app import ChatTextualApp, run_textual_tui
from .config import LogLevel
from .keymap import is_quit_key, translate_key
from .widgets import ChatListPanel, DebugPanel, HelpBar, InputPanel, MessagesPanel

__all__ = [
    "ChatListPanel",
    "ChatTextualApp",
    "DebugPanel",
    "HelpBar",
    "InputPanel",
    "LogLevel",
    "MessagesPanel",
    "is_quit_key",
    "run_textual_tui",
    "translate_key",
]

"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palette and visual appearance
- Theme variables (borders, scrollbars, footer)

Hovered panels use the accent color, focused panels the success color.
"""

from textual.theme import Theme

TERMCHAT_DARK = Theme(
    name="termchat-dark",
    primary="#89b4fa",      # Blue - titles
    secondary="#cba6f7",    # Mauve
    accent="#f9e2af",       # Yellow - hovered panel
    foreground="#cdd6f4",
    background="#11111b",
    success="#a6e3a1",      # Green - focused panel
    warning="#fab387",
    error="#f38ba8",
    surface="#1e1e2e",
    panel="#181825",
    dark=True,
    variables={
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",
        "text-muted": "#6c7086",
    },
)

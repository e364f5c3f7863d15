"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic: chat list
on the left quarter, help line, messages and composer stacked on the right,
log panel along the bottom when shown.
"""

APP_CSS = """
$panel-border: round $border;
$panel-border-hovered: round $accent;
$panel-border-focused: heavy $success;

#main {
    height: 1fr;
}

#chat-list {
    width: 25%;
    height: 100%;
    background: $panel;
    border: $panel-border;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    padding: 0 1;

    &.-hovered {
        border: $panel-border-hovered;
    }

    &.-focused {
        border: $panel-border-focused;
    }
}

#right-panel {
    width: 75%;
    height: 100%;
}

#help-bar {
    height: 1;
    padding: 0 1;
}

#messages {
    height: 1fr;
    background: $panel;
    border: $panel-border;
    border-title-color: $primary;
    border-title-style: bold;
    padding: 0 1;
    scrollbar-gutter: stable;

    &.-hovered {
        border: $panel-border-hovered;
    }

    &.-focused {
        border: $panel-border-focused;
    }
}

#messages-body {
    width: 100%;
    height: auto;
}

#composer {
    height: 3;
    border: $panel-border;
    border-title-color: $primary;
    padding: 0 1;

    &.-hovered {
        border: $panel-border-hovered;
    }

    &.-focused {
        border: $panel-border-focused;
        color: $success;
    }
}

#debug-panel {
    height: 10;
    border: round $border;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    background: $surface;
}
"""

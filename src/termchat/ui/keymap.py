"""Translation of terminal key presses into state machine actions.

Hides the key bindings: arrow keys always navigate, vi-style h/j/k/l and
``q`` to quit only apply while no text field is being edited, so every
printable key reaches the composer and the modal field as typed text.
"""

from ..core import actions
from ..core.actions import Action
from ..core.state import Section

NAMED_KEYS = {
    "up": actions.UP,
    "down": actions.DOWN,
    "left": actions.LEFT,
    "right": actions.RIGHT,
    "enter": actions.ENTER,
    "escape": actions.ESC,
    "backspace": actions.BACKSPACE,
}

VI_KEYS = {
    "h": actions.LEFT,
    "j": actions.DOWN,
    "k": actions.UP,
    "l": actions.RIGHT,
}

QUIT_CHAR = "q"


def is_editing(focus: Section | None) -> bool:
    """Whether printable keys are routed into a text field."""
    return focus in (Section.INPUT, Section.MODAL)


def is_quit_key(character: str | None, focus: Section | None) -> bool:
    return character == QUIT_CHAR and not is_editing(focus)


def translate_key(key: str, character: str | None, focus: Section | None) -> Action:
    """Map a key press to an Action.

    Args:
        key: Key name as reported by the terminal ("up", "enter", "a", ...)
        character: Printable character for the key, if any
        focus: Currently focused section

    Returns:
        The Action to dispatch. Unrecognized keys become raw KEY actions.
    """
    if key in NAMED_KEYS:
        return NAMED_KEYS[key]

    if character and character.isprintable():
        if not is_editing(focus) and character in VI_KEYS:
            return VI_KEYS[character]
        return Action.of_char(character)

    return Action.of_key(key)

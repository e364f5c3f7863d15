"""Abstract input alphabet consumed by the state machine.

Raw terminal events are translated into these actions by the UI layer
(see ``termchat.ui.keymap``).
"""

from dataclasses import dataclass
from enum import Enum


class ActionKind(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    BACKSPACE = "backspace"
    CHAR = "char"
    KEY = "key"


@dataclass(frozen=True)
class Action:
    """One input action.

    ``char`` is set for ``CHAR`` actions, ``key`` holds the raw key name
    for ``KEY`` actions.
    """

    kind: ActionKind
    char: str | None = None
    key: str | None = None

    @classmethod
    def of_char(cls, char: str) -> "Action":
        return cls(ActionKind.CHAR, char=char)

    @classmethod
    def of_key(cls, key: str) -> "Action":
        return cls(ActionKind.KEY, key=key)

    def is_char(self, char: str) -> bool:
        return self.kind is ActionKind.CHAR and self.char == char


UP = Action(ActionKind.UP)
DOWN = Action(ActionKind.DOWN)
LEFT = Action(ActionKind.LEFT)
RIGHT = Action(ActionKind.RIGHT)
ENTER = Action(ActionKind.ENTER)
ESC = Action(ActionKind.ESC)
BACKSPACE = Action(ActionKind.BACKSPACE)

"""Editing caret bounded by the length of the text it walks over.

Lengths are character counts, never byte counts, so multi-byte characters
move the caret by one step each.
"""


class Cursor:
    """Caret position clamped into ``[0, length]``.

    Every operation saturates at the nearest boundary instead of failing.
    """

    def __init__(self) -> None:
        self._position = 0
        self._length = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def length(self) -> int:
        return self._length

    def clamp(self, value: int) -> int:
        """Clamp a requested position into the valid range."""
        return max(0, min(value, self._length))

    def reset(self) -> None:
        """Move to the start and forget the tracked length."""
        self._position = 0
        self._length = 0

    def left(self) -> None:
        self._position = self.clamp(self._position - 1)

    def right(self) -> None:
        self._position = self.clamp(self._position + 1)

    def move_to_start(self) -> None:
        self._position = 0

    def move_to_end(self) -> None:
        self._position = self._length

    def move_to(self, position: int) -> None:
        self._position = self.clamp(position)

    def update_length(self, text: str) -> None:
        """Track the character count of ``text``.

        The position is re-clamped so a shorter text never leaves the
        caret past its end.
        """
        self._length = len(text)
        self._position = self.clamp(self._position)

    def is_at_start(self) -> bool:
        return self._position == 0

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={self._length})"

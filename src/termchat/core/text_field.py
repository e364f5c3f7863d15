"""Single-line text buffer with a managed caret.

Shared by the message composer and the New Chat / Rename Chat modal.
"""

from .cursor import Cursor

DEFAULT_MAX_LENGTH = 250


class TextField:
    """String buffer whose caret always stays inside the text.

    Invariants:
    - ``len(text) <= max_length``
    - ``cursor.length == len(text)`` after every mutation
    """

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        self.max_length = max_length
        self._text = ""
        self._cursor = Cursor()

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def cursor_position(self) -> int:
        return self._cursor.position

    def insert(self, char: str) -> None:
        """Insert ``char`` at the caret.

        Only the characters that still fit are inserted; a full field
        ignores the call. The caret ends after the inserted text.
        """
        chunk = char[: self.max_length - len(self._text)]
        if not chunk:
            return

        index = self._cursor.position
        self._text = self._text[:index] + chunk + self._text[index:]
        self._cursor.update_length(self._text)
        self._cursor.move_to(index + len(chunk))

    def delete(self) -> None:
        """Remove the character before the caret (backspace)."""
        if self._cursor.is_at_start():
            return

        index = self._cursor.position
        self._text = self._text[: index - 1] + self._text[index:]
        self._cursor.update_length(self._text)
        self._cursor.move_to(index - 1)

    def set_value(self, text: str) -> None:
        """Replace the buffer, truncating to ``max_length`` characters."""
        self._text = text[: self.max_length]
        self._cursor.update_length(self._text)
        self._cursor.move_to_end()

    def clear(self) -> None:
        self._text = ""
        self._cursor.reset()

    def left(self) -> None:
        self._cursor.left()

    def right(self) -> None:
        self._cursor.right()

    def home(self) -> None:
        self._cursor.move_to_start()

    def end(self) -> None:
        self._cursor.move_to_end()

    def is_empty(self) -> bool:
        return not self._text

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextField(text={self._text!r}, cursor={self._cursor!r})"

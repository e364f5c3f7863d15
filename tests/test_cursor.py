"""Unit tests for the cursor module."""
from hypothesis import given
from hypothesis import strategies as st

from termchat.core import Cursor


class TestCursor:
    """Tests for Cursor bounds."""

    def test_starts_at_zero(self):
        """Test a new cursor sits at the start of an empty text."""
        cursor = Cursor()

        assert cursor.position == 0
        assert cursor.length == 0
        assert cursor.is_at_start()

    def test_left_saturates_at_start(self):
        """Test moving left at position 0 is a no-op."""
        cursor = Cursor()
        cursor.update_length("abc")
        cursor.left()

        assert cursor.position == 0

    def test_right_saturates_at_length(self):
        """Test moving right never passes the end of the text."""
        cursor = Cursor()
        cursor.update_length("ab")
        for _ in range(5):
            cursor.right()

        assert cursor.position == 2

    def test_shorter_text_reclamps_position(self):
        """Test shrinking the text pulls the caret back inside it."""
        cursor = Cursor()
        cursor.update_length("hello")
        cursor.move_to_end()
        cursor.update_length("hi")

        assert cursor.position == 2

    def test_length_counts_characters(self):
        """Test multi-byte characters count as one position each."""
        cursor = Cursor()
        cursor.update_length("héllo ☃")

        assert cursor.length == 7

    def test_reset(self):
        """Test reset returns to an empty range."""
        cursor = Cursor()
        cursor.update_length("abc")
        cursor.move_to_end()
        cursor.reset()

        assert cursor.position == 0
        assert cursor.length == 0

    @given(
        st.lists(
            st.one_of(
                st.sampled_from(["left", "right", "start", "end"]),
                st.text(max_size=20),
            ),
            max_size=50,
        )
    )
    def test_position_stays_in_bounds(self, operations):
        """Property test: 0 <= position <= length after every operation."""
        cursor = Cursor()
        for op in operations:
            if op == "left":
                cursor.left()
            elif op == "right":
                cursor.right()
            elif op == "start":
                cursor.move_to_start()
            elif op == "end":
                cursor.move_to_end()
            else:
                cursor.update_length(op)
            assert 0 <= cursor.position <= cursor.length

    def test_move_to_clamps(self):
        """Test jumping to a position outside the text saturates."""
        cursor = Cursor()
        cursor.update_length("abc")

        cursor.move_to(2)
        assert cursor.position == 2
        cursor.move_to(10)
        assert cursor.position == 3
        cursor.move_to(-4)
        assert cursor.position == 0

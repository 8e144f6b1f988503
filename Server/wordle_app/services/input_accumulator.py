"""
Input Accumulator

Builds the in-progress guess on the board's current row.
"""

from ..models.board import Board


class InputAccumulator:
    """Letter and delete edits on the current row of a board."""

    def __init__(self, board: Board):
        self.board = board

    def append_letter(self, ch: str) -> bool:
        """
        Fill the next empty cell of the current row.

        Returns:
            True if a cell was filled, False if the input was ignored
        """
        if not isinstance(ch, str) or len(ch) != 1 or not ch.isalpha():
            return False

        row = self.board.current_row
        if row is None or row.is_full:
            return False

        row[row.filled_count].fill(ch.lower())
        return True

    def delete_last_letter(self) -> bool:
        """Clear the last filled cell of the current row, if any."""
        row = self.board.current_row
        if row is None or row.is_empty:
            return False

        row[row.filled_count - 1].clear()
        return True

    def current_guess_length(self) -> int:
        row = self.board.current_row
        return row.filled_count if row is not None else 0

    def current_guess(self) -> str:
        row = self.board.current_row
        return row.word if row is not None else ''

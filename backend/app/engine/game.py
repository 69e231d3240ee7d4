import logging
from typing import List, Optional

from backend.app.engine import board as board_model
from backend.app.engine.constants import COLS, COLUMN_FULL, PLAYER_ONE, other_player

# Logger setup
logger = logging.getLogger(__name__)

class ConnectFour:
    def __init__(self):
        """
        Turn and winner bookkeeping around a board from board_model.
        Row 0 is the TOP of the board, row 5 the BOTTOM.
        Values: 0=Empty, 1=Player1, 2=Player2
        """
        self.board = board_model.empty_board()
        self.current_turn = PLAYER_ONE
        self.winner: Optional[int] = None

    def get_valid_moves(self) -> List[int]:
        """Returns a list of column indices (0-6) that are not full."""
        return board_model.legal_columns(self.board)

    def is_valid_move(self, col: int) -> bool:
        if col < 0 or col >= COLS:
            return False
        return board_model.landing_row(self.board, col) != COLUMN_FULL

    def drop_piece(self, col: int) -> bool:
        """
        Drops a piece into the specified column.
        Returns True if successful, False if invalid or game over.
        """
        if self.winner is not None or not self.is_valid_move(col):
            return False

        row = board_model.landing_row(self.board, col)
        self.board = board_model.drop(self.board, col, self.current_turn)

        if board_model.is_winning_line(self.board, row, col):
            self.winner = self.current_turn
            logger.info("Player %s wins with column %s", self.winner, col)
        else:
            self.switch_turn()
        return True

    def switch_turn(self):
        self.current_turn = other_player(self.current_turn)

    def is_draw(self) -> bool:
        """Returns True if board is full and no winner."""
        return self.winner is None and board_model.is_full(self.board)

    def get_visual_board(self) -> str:
        return board_model.render(self.board)

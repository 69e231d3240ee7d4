# backend/app/engine/constants.py

# --- Board Dimensions ---
# Row 0 is the TOP of the board, row 5 the BOTTOM.
ROWS = 6
COLS = 7
CENTER_COL = COLS // 2

# --- Cell Values ---
EMPTY = 0
PLAYER_ONE = 1
PLAYER_TWO = 2
PLAYERS = (PLAYER_ONE, PLAYER_TWO)

# Sentinel for "no column" (full column, full board, opening book miss)
NO_MOVE = -1
COLUMN_FULL = -1

# --- Scoring System ---
# Forced win/loss = WIN_SCORE * (remaining depth + 1)
# so shallower forced outcomes outrank deeper ones.
WIN_SCORE = 1000
OPENING_BOOK_SCORE = 1000

# --- Optimization ---
# Search center columns first to maximize Alpha-Beta pruning efficiency
COLUMN_ORDER = (3, 2, 4, 1, 5, 0, 6)


def other_player(player: int) -> int:
    return PLAYER_ONE if player == PLAYER_TWO else PLAYER_TWO

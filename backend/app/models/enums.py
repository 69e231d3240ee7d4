from enum import StrEnum

class Rationale(StrEnum):
    OPENING_BOOK = "opening book move"
    WINNING_MOVE = "winning move"
    WIN_DETECTED = "winning move detected"
    VERY_STRONG = "very strong position"
    GOOD = "good position"
    OPPONENT_WIN = "opponent win detected"
    DANGEROUS = "dangerous position"
    NEUTRAL = "neutral position"
    EVALUATED = "evaluated position"
    FALLBACK = "fallback move"

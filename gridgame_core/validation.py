from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from .errors import GridGameError
from .moves import Direction, Move

MAX_NAME_LENGTH = 8
CHEAT_WORD = 'cheat'
MAX_DIGITS = 3


class MoveError(Enum):
    """Why a typed move was rejected."""

    LENGTH = 1
    DISTANCE = 2
    DIRECTION = 3


class MoveFormatError(ValueError, GridGameError):
    def __init__(self, text: str, reason: MoveError) -> None:
        super().__init__(f'Invalid move {text!r}: {reason.name.lower()}')
        self.text = text
        self.reason = reason


def is_int(text: str) -> bool:
    """True for a non-empty run of ASCII digits."""
    return text != '' and all('0' <= ch <= '9' for ch in text)


def int_in_range(value: int, lo: int, hi: int) -> bool:
    return lo <= value <= hi


def bounded_int(text: str, lo: int, hi: int) -> Optional[int]:
    """The digits in ``text`` as an int within [lo, hi], or None.

    Every menu answer is short, so anything longer than MAX_DIGITS is out of
    range without being converted.
    """
    if not is_int(text) or len(text) > MAX_DIGITS:
        return None
    value = int(text)
    return value if int_in_range(value, lo, hi) else None


def is_yes_no(text: str) -> bool:
    return text.strip().upper() in ('Y', 'N')


def is_cheat(text: str) -> bool:
    return text.strip().lower() == CHEAT_WORD


def is_name_invalid(name: Optional[str]) -> bool:
    return not name or len(name) > MAX_NAME_LENGTH


def is_name_taken(name: str, taken: Iterable[str]) -> bool:
    return any(name.lower() == other.lower() for other in taken)


def validate_move(text: str, movement_range: int) -> Optional[MoveError]:
    """Checks a move such as ``2W``: one digit in [1, movement_range] then A, W, S or D."""
    text = text.strip().upper()
    if len(text) != 2:
        return MoveError.LENGTH
    distance = ord(text[0]) - ord('0')
    if distance < 1 or distance > movement_range:
        return MoveError.DISTANCE
    if text[1] not in 'AWSD':
        return MoveError.DIRECTION
    return None


def parse_move(text: str, movement_range: int) -> Move:
    error = validate_move(text, movement_range)
    if error is not None:
        raise MoveFormatError(text, error)
    text = text.strip().upper()
    return Move(distance=int(text[0]), direction=Direction.from_key(text[1]))
